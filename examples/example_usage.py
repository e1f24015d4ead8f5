"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; validation and use cases live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_admin.payroll_admin.container import build_container
from src.payroll_admin.payroll_admin.deductions.model import AssignmentCandidate


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    types = container.deduction_type_service.list_types()
    for t in types:
        print(f"{t.deduction_type_id}: {t.name} ({t.calculation_strategy.label})")

    if types:
        normalized = container.user_deduction_service.preview(
            types[0].deduction_type_id, AssignmentCandidate(amount="150000", percentage="2.5")
        )
        print(normalized.to_payload())


if __name__ == "__main__":
    main()
