"""
GPU Acceleration Benchmark for the Decoder Wheel

Compares scalar decoding in a Python loop with batched tensor decoding at
different batch sizes on the detected backend (CPU, MPS, CUDA).
"""

import time
import torch
import numpy as np
from core.decoder import decode, decode_batch
from core.word_table import NUM_GAMES, NUM_GLYPHS, NUM_SPIRALS
from utils.device import get_device, get_device_name


def random_settings(batch_size: int, seed: int = 42) -> tuple[np.ndarray, ...]:
    """Draw batch_size random complete wheel settings."""
    rng = np.random.default_rng(seed)
    games = rng.integers(0, NUM_GAMES, batch_size)
    espuar = rng.integers(0, NUM_GLYPHS, batch_size)
    dethek = rng.integers(0, NUM_GLYPHS, batch_size)
    spirals = rng.integers(0, NUM_SPIRALS, batch_size)
    return games, espuar, dethek, spirals


def benchmark_decoding(batch_size: int, n_iterations: int = 10):
    """Benchmark scalar and batched decoding at given batch size."""
    device = get_device()
    games, espuar, dethek, spirals = random_settings(batch_size)
    tensors = [torch.as_tensor(x, device=device) for x in (games, espuar, dethek, spirals)]

    # Warm up
    _ = decode_batch(*tensors, device=device)

    start = time.time()
    for _ in range(n_iterations):
        for g, e, d, s in zip(games.tolist(), espuar.tolist(), dethek.tolist(), spirals.tolist()):
            decode(g, e, d, s)
    scalar_time = (time.time() - start) / n_iterations

    start = time.time()
    for _ in range(n_iterations):
        _ = decode_batch(*tensors, device=device)
    batch_time = (time.time() - start) / n_iterations

    return scalar_time, batch_time


def main():
    print("=" * 60)
    print("GPU ACCELERATION BENCHMARK - Decoder Wheel")
    print("=" * 60)
    print()

    print(f"Device: {get_device_name()}")
    print(f"PyTorch version: {torch.__version__}")
    print()

    batch_sizes = [1, 64, 1024, 16384]

    print(f"{'Batch':>6} | {'Scalar (us/word)':>16} | {'Batched (us/word)':>17} | {'Throughput':>14}")
    print("-" * 66)

    results = []
    for batch_size in batch_sizes:
        scalar_time, batch_time = benchmark_decoding(batch_size, n_iterations=10)

        scalar_per_word = (scalar_time * 1e6) / batch_size
        batch_per_word = (batch_time * 1e6) / batch_size
        throughput = batch_size / batch_time

        print(f"{batch_size:6d} | {scalar_per_word:16.2f} | {batch_per_word:17.2f} | {throughput:9.0f} w/s")

        results.append({
            'batch_size': batch_size,
            'scalar_per_word': scalar_per_word,
            'batch_per_word': batch_per_word,
            'throughput': throughput
        })

    print()
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)

    largest = results[-1]
    speedup = largest['scalar_per_word'] / largest['batch_per_word']

    print(f"Batched speedup @ batch_size={largest['batch_size']}: {speedup:.2f}x")
    print(f"Peak throughput: {largest['throughput']:.0f} words/sec")
    print()


if __name__ == "__main__":
    main()
