from __future__ import annotations

import json as jsonlib


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        if text is not None:
            self.content = text.encode()
        else:
            self.content = b"" if body is None else jsonlib.dumps(body).encode()

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    """Records calls and answers from a route table keyed by (method, path)."""

    def __init__(self, routes=None, base_url="http://backend.test/api"):
        self.routes = dict(routes or {})
        self.base_url = base_url
        self.calls = []

    def request(self, method, url, *, params=None, json=None, headers=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append({"method": method, "path": path, "params": params, "json": json, "headers": headers})
        answer = self.routes.get((method, path), FakeResponse(404, {"message": "Not found"}))
        if isinstance(answer, Exception):
            raise answer
        return answer
