"""Symbol-domain algebras that drive the shared round pipeline."""

from ..interfaces import CipherAlgebra
from .rijndael import RijndaelAlgebra
from .text import TextAlgebra

# Registry of available algebras
ALGEBRAS: dict[str, type] = {
    "rijndael": RijndaelAlgebra,
    "text": TextAlgebra,
}


def get_algebra(name: str) -> CipherAlgebra:
    """Get an algebra instance by name.

    Args:
        name: Algebra name

    Returns:
        Algebra instance

    Raises:
        KeyError: If algebra not found
    """
    if name not in ALGEBRAS:
        available = ", ".join(ALGEBRAS.keys())
        raise KeyError(f"Unknown algebra '{name}'. Available: {available}")
    return ALGEBRAS[name]()


def list_algebras() -> list[dict[str, str]]:
    """List all available algebras with descriptions.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    result = []
    for name, cls in ALGEBRAS.items():
        result.append({
            "name": name,
            "description": getattr(cls, "description", "No description"),
        })
    return result


__all__ = [
    "ALGEBRAS",
    "get_algebra",
    "list_algebras",
    "RijndaelAlgebra",
    "TextAlgebra",
]
