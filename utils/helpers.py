# Utility functions

def require_uint(value, bits, field):
    """
    Checks that value is an int that fits in an unsigned field of the given width.
    Returns the value unchanged so it can be used inline.
    """
    # bool is an int subclass but never a valid price or quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}.")
    if value < 0:
        raise ValueError(f"{field} must be non-negative, got {value}.")
    if value.bit_length() > bits:
        raise ValueError(f"{field} does not fit in uint{bits}: {value}")
    return value


def format_item(index, item):
    """
    Formats a stored item for display.
    """
    return {
        "index": index,
        "name": item.name,
        "price": item.price,
        "quantity": item.quantity,
    }


if __name__ == "__main__":
    # Example usage
    print(require_uint(2 ** 40 - 1, 40, "quantity"))
