#!/usr/bin/env python3
"""
Codec Validation
================
Runs the binary16, generic quantizer and compact-18 codecs over synthetic
float32 data and reports round-trip error, packed width and throughput.
"""

import json
import time
import numpy as np

from floatpack import (
    HalfCodec, Compact18Codec, FloatQuantizer, QuantizerConfig, analyze_codec
)


# ============================================================================
# Data
# ============================================================================

def generate_values(size: int, distribution: str = 'gaussian', scale: float = 100.0) -> np.ndarray:
    """Generate synthetic float32 values."""
    if distribution == 'gaussian':
        values = np.random.randn(size) * scale
    elif distribution == 'laplacian':
        values = np.random.laplace(0, scale, size)
    elif distribution == 'uniform':
        values = np.random.uniform(-scale, scale, size)
    else:
        raise ValueError(f"Unknown distribution: {distribution}")
    return values.astype(np.float32)


# ============================================================================
# Validation
# ============================================================================

def build_codecs(precision: int) -> dict:
    config = QuantizerConfig(precision=precision)
    return {
        'binary16': HalfCodec(),
        f'quantizer-p{precision}': FloatQuantizer.from_config(config),
        'compact18': Compact18Codec(),
    }


def validate_codec(name: str, codec, values: np.ndarray) -> dict:
    """Analyze one codec and time a compress/decompress pass."""
    report = analyze_codec(codec, values, name=name)

    t0 = time.perf_counter()
    codes = codec.compress(values)
    encode_time = time.perf_counter() - t0

    t0 = time.perf_counter()
    codec.decompress(codes)
    decode_time = time.perf_counter() - t0

    result = report.to_dict()
    result['encode_time_ms'] = encode_time * 1000
    result['decode_time_ms'] = decode_time * 1000
    return result


def run_validation(
    size: int = 100_000,
    distribution: str = 'gaussian',
    scale: float = 100.0,
    precision: int = 12,
    seed: int = 42
) -> list:
    np.random.seed(seed)
    values = generate_values(size, distribution, scale)

    return [
        validate_codec(name, codec, values)
        for name, codec in build_codecs(precision).items()
    ]


def print_results(results: list, distribution: str, size: int):
    print("=" * 75)
    print("CODEC VALIDATION")
    print("=" * 75)
    print(f"Distribution: {distribution.upper()}, Values: {size:,}")
    print("=" * 75)

    print(f"  {'Codec':<16} {'Bits':>5} {'Ratio':>7} {'SQNR (dB)':>10} "
          f"{'Max error':>12} {'Stable':>7} {'Enc ms':>8} {'Dec ms':>8}")
    print(f"  {'-'*16} {'-'*5} {'-'*7} {'-'*10} {'-'*12} {'-'*7} {'-'*8} {'-'*8}")
    for r in results:
        print(f"  {r['name']:<16} {r['bits']:>5} {r['compression_ratio']:>6.2f}x "
              f"{r['sqnr']:>10.2f} {r['max_error']:>12.6g} "
              f"{'yes' if r['idempotent'] else 'NO':>7} "
              f"{r['encode_time_ms']:>8.2f} {r['decode_time_ms']:>8.2f}")


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Validate float quantization codecs")
    parser.add_argument("--size", type=int, default=100_000,
                        help="Number of values to generate")
    parser.add_argument("--distribution", type=str, default="gaussian",
                        choices=["gaussian", "laplacian", "uniform"],
                        help="Distribution of the synthetic values")
    parser.add_argument("--scale", type=float, default=100.0,
                        help="Scale (std / range) of the synthetic values")
    parser.add_argument("--precision", type=int, default=12,
                        help="Mantissa bits kept by the generic quantizer")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON")

    args = parser.parse_args()

    results = run_validation(
        size=args.size,
        distribution=args.distribution,
        scale=args.scale,
        precision=args.precision,
        seed=args.seed,
    )

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print_results(results, args.distribution, args.size)
