import cProfile

from scryptparams.pickparams import pickparams


def runner() -> None:
    for maxtime in [0.01, 0.1, 1.0]:
        print(maxtime, pickparams(0, 0.5, maxtime))


with cProfile.Profile() as pr:
    pr.runcall(runner)
    pr.print_stats(sort='cumulative')

# Run with pytest -s performance/profile_pickparams.py
#
# Nearly all time goes to the scrypt calls in cpuperf(), which runs for a fixed ~10ms per pickparams() call no matter
# the maxtime asked for; choose_params() doesn't show up at all.
