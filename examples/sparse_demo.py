import os
import sys
import logging
from decimal import Decimal

# Add the src directory to Python path to import local sparse_decimal
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_decimal import SparseDecimalMatrix, SparseMatrixBuilder, ArithmeticConfig
from sparse_decimal.logging_config import setup_logging



def build_identity(n: int) -> SparseDecimalMatrix:
    builder = SparseMatrixBuilder(n, n)
    for i in range(n):
        builder.set(i, i, 1)
    return builder.build()


def sparse_demo():
    setup_logging(level=logging.DEBUG)
    context = ArithmeticConfig(precision=50).to_context()

    n = 1000
    identity = build_identity(n)
    print(f"identity: {identity.filled_count()} stored of {identity.size} cells, empty ratio {identity.empty_ratio():.6f}")

    # a third everywhere, except on the diagonal
    thirds = SparseDecimalMatrix(n, n, default_value=Decimal(1) / Decimal(3))
    shifted = identity.add(thirds, context)
    print(f"identity + 1/3: default {shifted.default_value}, {shifted.filled_count()} stored cells")
    print(f"sum: {shifted.sum(context)}")
    print(f"product: {shifted.product(context)}")

    scaled = shifted.multiply(3, context)
    print(f"3 * (identity + 1/3): default {scaled.default_value}, {scaled.filled_count()} stored cells")
    print(scaled.to_dataframe().head())


if __name__ == "__main__":
    sparse_demo()
