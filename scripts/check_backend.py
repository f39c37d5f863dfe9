"""Run a connectivity check against the hosted auth/DB backend."""

from __future__ import annotations

import asyncio

from zolarus.backend.client import check_backend


def _format_result(name: str, success: bool, message: str) -> str:
    status = "✅" if success else "❌"
    return f"{status} {name}: {message}"


def main() -> None:
    success, message = asyncio.run(check_backend())
    print(_format_result("Backend", success, message))


if __name__ == "__main__":
    main()
