
class MatrixConfigError(ValueError):
    """Base class for arithmetic configuration errors."""
    pass

class DecimalMatrixError(ValueError):
    """Base class for decimal matrix runtime errors."""
    pass



class InvalidPrecisionError(MatrixConfigError):
    """Raised when a precision is not a positive integer."""
    
    def __init__(self, precision):
        self.precision = precision
        message = f"Invalid precision {precision!r}. Must be a positive integer or None for exact arithmetic"
        super().__init__(message)


class InvalidRoundingModeError(MatrixConfigError):
    """Raised when an unknown rounding mode name is provided."""
    
    def __init__(self, rounding: str, valid_modes: list = None):
        self.rounding = rounding
        self.valid_modes = valid_modes
        if valid_modes is None:
            message = f"Invalid rounding mode '{rounding}'. "
        else:
            message = f"Invalid rounding mode '{rounding}'. Must be one of: {valid_modes}"
        super().__init__(message)


class ConstructionError(DecimalMatrixError):
    """Raised when a matrix is constructed with a non-positive row or column count."""
    
    def __init__(self, dimension: str, value):
        self.dimension = dimension
        self.value = value
        message = f"{dimension} must be a positive integer, got {value!r}"
        super().__init__(message)


class ValueCountError(ConstructionError):
    """Raised when a flat value sequence does not cover every cell exactly once."""
    
    def __init__(self, rows: int, columns: int, count: int):
        self.rows = rows
        self.columns = columns
        self.count = count
        DecimalMatrixError.__init__(self, f"Expected {rows * columns} values for a {rows}x{columns} matrix, got {count}")


class BoundsError(DecimalMatrixError, IndexError):
    """Base class for row and column indices outside of the matrix."""
    
    def __init__(self, dimension: str, index, limit: int):
        self.dimension = dimension
        self.index = index
        self.limit = limit
        message = f"{dimension} {index!r} out of range [0, {limit})"
        super().__init__(message)


class RowOutOfRangeError(BoundsError):
    """Raised when a row index is outside [0, rows)."""
    
    def __init__(self, row, rows: int):
        super().__init__("Row", row, rows)


class ColumnOutOfRangeError(BoundsError):
    """Raised when a column index is outside [0, columns)."""
    
    def __init__(self, column, columns: int):
        super().__init__("Column", column, columns)


class IndexOutOfRangeError(BoundsError):
    """Raised when a linear (row-major) index is outside [0, rows * columns)."""
    
    def __init__(self, index, size: int):
        super().__init__("Index", index, size)


class ShapeMismatchError(DecimalMatrixError):
    """Raised when a binary operation is invoked on matrices of differing shape."""
    
    def __init__(self, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.left_shape = left_shape
        self.right_shape = right_shape
        
        message = f"Matrix shapes do not match: {left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}"
        super().__init__(message)


class BuilderConsumedError(DecimalMatrixError):
    """Raised when a builder is used after it has produced its frozen matrix."""
    
    def __init__(self, operation: str):
        self.operation = operation
        message = f"Cannot {operation}: builder was already consumed by build()"
        super().__init__(message)
