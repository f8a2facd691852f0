# Repository errors

class IndexOutOfRange(IndexError):
    """
    Raised when a lookup index is not strictly less than the registry length.
    """
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f"Item index {index} out of range for registry of length {length}.")
