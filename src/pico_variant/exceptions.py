class VariantError(Exception):
    pass

class InvalidArgumentError(VariantError, ValueError):
    pass

class WeightOutOfRangeError(InvalidArgumentError):
    def __init__(self, weight: int, minimum: int, maximum: int):
        self.weight = weight
        super().__init__(f"Weight must be between {minimum} and {maximum}, got {weight}.")

class InvalidOperationError(VariantError, RuntimeError):
    pass

class IndexOutOfRangeError(VariantError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Variant index {index} is out of range for {size} variant(s).")
