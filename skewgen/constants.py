MAX_UINT64 = 2**64 - 1

# YCSB defaults for a growing key space.
DEFAULT_MIN = 1
DEFAULT_MAX = 10_000_000_000
DEFAULT_THETA = 0.99
# zeta(DEFAULT_MAX, DEFAULT_THETA), too expensive to sum at construction time
DEFAULT_ZETA_N = 26.46902820178302

# number of terms summed per numpy batch when computing zeta from scratch
ZETA_CHUNK_SIZE = 1 << 20
