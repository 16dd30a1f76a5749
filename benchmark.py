import time
import numpy as np
from forte.prime_form import Algorithm, prime_form

def run_benchmark():
    # Setup
    np.random.seed(42)
    # Generate 100,000 random pitch-class sets (each pc kept with p = 0.5)
    masks = np.random.rand(100000, 12) < 0.5
    pitch_class_sets = [np.flatnonzero(row).tolist() for row in masks]

    # Pre-warm
    prime_form(pitch_class_sets[0], Algorithm.FORTE)

    # Benchmark
    for algorithm in Algorithm:
        start_time = time.perf_counter()
        for pcs in pitch_class_sets:
            prime_form(pcs, algorithm)
        end_time = time.perf_counter()

        duration = end_time - start_time
        print(f"Benchmark duration ({algorithm.value}): {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
