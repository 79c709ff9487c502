import random
import string

from pyinstrument import Profiler
from sortedarray import Mode, SortedStringArray


def random_words(n, seed=0):
    rng = random.Random(seed)
    return ["".join(rng.choices(string.ascii_lowercase, k=8)) for _ in range(n)]


def benchmark_large():
    words = random_words(20_000)
    print(f"Generated {len(words)} words")

    profiler = Profiler()
    profiler.start()

    N = 5
    print(f"Starting computation ({N} iterations)...")
    for mode in (Mode.SAFE, Mode.UNSAFE):
        for _ in range(N):
            arr = SortedStringArray(capacity=len(words), mode=mode)
            arr.add(*words)
            for w in words[::10]:
                arr.contains(w)
            arr.chunk(100)
            arr.rand(1000)
            for _ in range(1000):
                arr.pop_left()
                arr.pop_right()
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("sortedarray_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
