import os

# ------- Tunables (app settings) -------
STRASSEN_THRESHOLD = int(os.getenv("STRASSEN_THRESHOLD", "64"))        # base-case crossover
PADDING_SCHEME     = os.getenv("PADDING_SCHEME", "pow2").lower()        # pow2 | even
PARALLEL_DEPTH     = int(os.getenv("STRASSEN_PARALLEL_DEPTH", "0"))     # fork-join levels
MAX_DIM_SINGLE     = int(os.getenv("MAX_DIM_SINGLE", "4096"))           # HTTP size guard

PADDING_SCHEMES = ("pow2", "even")

BLAS_THREAD_VARS = ["OMP_NUM_THREADS", "OPENBLAS_NUM_THREADS", "MKL_NUM_THREADS",
                    "NUMEXPR_NUM_THREADS", "VECLIB_MAXIMUM_THREADS"]
