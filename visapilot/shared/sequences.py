"""Human-readable display IDs (CLI-0001, PAT-0001, INV-0001)."""

CLIENT_PREFIX = "CLI"
PATIENT_PREFIX = "PAT"
INVOICE_PREFIX = "INV"


def format_display_id(prefix: str, number: int) -> str:
    """Format ``number`` as ``PREFIX-0000`` (at least four digits)."""
    if number < 1:
        raise ValueError("Display id numbers start at 1")
    return f"{prefix}-{number:04d}"


async def next_display_id(database, prefix: str) -> str:
    """Reserve the next display id for ``prefix``.
    
    The counter is advanced with a single atomic update, so concurrent
    creates never receive the same id.
    """
    number = await database.next_sequence(prefix.lower())
    return format_display_id(prefix, number)
