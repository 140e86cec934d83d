# Defaults applied to the optional arguments of params(). A maxmem of 0 means "no explicit byte limit": only the
# fraction of available memory is used.
MAXMEM_DEFAULT = 0
MAXMEMFRAC_DEFAULT = 0.5

# The resolver never uses more than half of the available memory, no matter what fraction is asked for...
MAX_MEMFRAC = 0.5

# ...but always allows at least 1 MiB.
MIN_MEMLIMIT = 1024 * 1024

# Allow a minimum of 2^15 salsa20/8 cores.
MIN_OPSLIMIT = 32768

# r is fixed; only N and p are tuned.
FIXED_R = 8

MAX_RP = 0x3fffffff
MAX_LOG_N = 63

# CPU speed is measured by timing scrypt(N=128, r=1, p=1), which amounts to 4 * N * r = 512 salsa20/8 cores per call.
CPUPERF_N = 128
CPUPERF_CORES_PER_CALL = 4 * CPUPERF_N

# Nanosecond clocks tick after every call; measure at least this many seconds so a single call doesn't decide.
CPUPERF_MIN_MEASURE_TIME = 0.01

# How often a background completion thread wakes up to see whether its loop has been closed.
COMPLETION_POLL_INTERVAL = 0.1
