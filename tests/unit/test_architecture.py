"""
Architecture rules.

The domain layer must not depend on frameworks or outer layers, and the
application layer must not depend on adapters.
"""
from pathlib import Path
import ast

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _imported_modules(package: str):
    for path in sorted((PROJECT_ROOT / package).rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    yield path, alias.name
            elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
                yield path, node.module


@pytest.mark.parametrize(
    "package, forbidden",
    [
        (
            "core/domain",
            ("core.application", "core.infrastructure", "core.data", "api", "sqlalchemy", "fastapi", "pydantic", "aiohttp"),
        ),
        (
            "core/application/use_cases",
            ("core.infrastructure", "core.data", "api", "sqlalchemy", "fastapi", "aiohttp"),
        ),
    ],
)
def test_layer_has_no_forbidden_imports(package, forbidden):
    violations = [
        f"{path.relative_to(PROJECT_ROOT)}: {module}"
        for path, module in _imported_modules(package)
        if any(module == name or module.startswith(name + ".") for name in forbidden)
    ]

    assert violations == []
