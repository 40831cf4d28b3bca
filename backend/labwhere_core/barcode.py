"""Location barcode derivation."""

BARCODE_PREFIX = "lw"


def slugify(name: str) -> str:
    """Trim, replace spaces with hyphens, lower-case (in that order)."""
    return name.strip().replace(" ", "-").lower()


def generate_barcode(name: str, id: int) -> str:
    """Barcode format: lw-{slug}-{id}, e.g. "location 1" with id 1 -> "lw-location-1-1"."""
    return f"{BARCODE_PREFIX}-{slugify(name)}-{id}"
