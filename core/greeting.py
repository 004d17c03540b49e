# =============================================================================
# core/greeting.py  —  The hello-world tool's logic
# =============================================================================


def say_hello_name(name: str) -> str:
    """Greet `name`.  No validation: whatever comes in is echoed back."""
    return f"Hello World, {name}"
