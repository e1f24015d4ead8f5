"""Check every deduction type stored in the backend against the rule catalog.

Exits non-zero when a record carries an unknown strategy or a rule that does
not match its strategy (e.g. a PER_LATE_INSTANCE type without ruleAmount).
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_admin.payroll_admin.api.connection import ApiClient, ApiConfig
from src.payroll_admin.payroll_admin.api.rest_base import as_list
from src.payroll_admin.payroll_admin.core.enums import CalculationStrategy
from src.payroll_admin.payroll_admin.core.exceptions import UnknownCalculationStrategy, ValidationError
from src.payroll_admin.payroll_admin.deductions.rest_repository import to_deduction_type
from src.payroll_admin.payroll_admin.deductions.validator import validate_deduction_type


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    api_config = dict(settings.API_CONFIG)
    client = ApiClient(ApiConfig(base_url=api_config["base_url"], token=api_config.get("token")))

    problems = 0
    rows = as_list(client.get("/admin/deduction-types"))
    for row in rows:
        try:
            validate_deduction_type(to_deduction_type(row))
        except UnknownCalculationStrategy as e:
            problems += 1
            print(f"UNKNOWN  {row.get('id')}: {e}")
        except ValidationError as e:
            problems += 1
            print(f"INVALID  {row.get('id')} ({row.get('calculationType')}): {e}")

    print(f"Checked {len(rows)} deduction types against {len(CalculationStrategy)} strategies, {problems} problem(s)")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
