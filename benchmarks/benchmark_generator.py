"""Generator micro benchmarks."""

from time import perf_counter

from randref.core.complement import reverse_complement
from randref.generation import RunLengthGenerator, RunLengthWeights

LENGTHS = (10_000, 100_000, 1_000_000)


def time_generate(generator: RunLengthGenerator, length: int) -> float:
    start = perf_counter()
    generator.generate(length)
    return perf_counter() - start


def time_reverse_complement(length: int) -> float:
    tokens = RunLengthGenerator(seed=0).generate(length).tokens
    start = perf_counter()
    reverse_complement(tokens)
    return perf_counter() - start


if __name__ == "__main__":
    models = {
        "default": RunLengthWeights(),
        "single_bonus=200": RunLengthWeights(single_bonus=200.0),
    }
    for name, weights in models.items():
        generator = RunLengthGenerator(weights=weights, seed=0)
        for length in LENGTHS:
            print(f"generate[{name}] {length}: {time_generate(generator, length):.6f}s")
    for length in LENGTHS:
        print(f"reverse_complement {length}: {time_reverse_complement(length):.6f}s")
