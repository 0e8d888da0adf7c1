"""
Performance and quality benchmarking for the platform layout generator.

Usage:
    python performance_benchmarks.py

This is a standalone, non-pytest script intended for:
- Measuring generation time across many seeds and platform counts
- Tracking how often the requested platform count is reached
- Checking that every generated layout passes the reachability verification
- Emitting summary metrics to guide constraint tuning
"""

import logging
import statistics
import time
from dataclasses import replace

from levelgen.level.platform_data import GenerationConfig, MovementConstraints
from levelgen.level.platform_generator import PlatformGenerator
from levelgen.level.traversal_verification import find_unreachable_platforms, reachable_from_start

GENERATION_TIME_TARGET = 5  # ms
FILL_RATE_TARGET = 0.9

PLATFORM_COUNTS = [5, 20, 50]
MOVEMENT_PRESETS = {
    "default": MovementConstraints(),
    "tight": MovementConstraints(max_jump_height=1.5, max_jump_distance=3.0, max_fall_distance=4.0),
    "floaty": MovementConstraints(max_jump_height=5.0, max_jump_distance=8.0, max_fall_distance=12.0),
}


def benchmark_configuration(config: GenerationConfig, world_seed: int, runs: int = 50):
    gen_times = []
    fill_ratios = []
    complete_count = 0
    unreachable_layouts = 0
    stranded_layouts = 0

    for i in range(runs):
        generator = PlatformGenerator(replace(config, seed=world_seed + i))

        start = time.perf_counter()
        result = generator.generate()
        gen_times.append((time.perf_counter() - start) * 1000.0)

        fill_ratios.append(result.fill_ratio)
        if result.is_complete:
            complete_count += 1

        positions = result.placed_positions
        if find_unreachable_platforms(positions, config.movement, config.world.ground_y):
            unreachable_layouts += 1
        if len(reachable_from_start(positions, config.movement, config.world.ground_y)) < len(positions):
            stranded_layouts += 1

    return {
        "runs": runs,
        "avg_gen_ms": statistics.mean(gen_times),
        "p95_gen_ms": sorted(gen_times)[int(0.95 * (len(gen_times) - 1))],
        "max_gen_ms": max(gen_times),
        "avg_fill": statistics.mean(fill_ratios),
        "complete_rate": complete_count / runs if runs else 0.0,
        "unreachable_layouts": unreachable_layouts,
        "stranded_layouts": stranded_layouts,
    }


def print_report_row(label: str, value: str):
    print(f"{label:<34} {value}")


def run_all_benchmarks():
    print("=== Platform Generation Benchmarks ===")
    print(f"Target generation time: {GENERATION_TIME_TARGET} ms")
    print("======================================\n")

    world_seed = 20251108
    for preset_name, movement in MOVEMENT_PRESETS.items():
        for count in PLATFORM_COUNTS:
            config = GenerationConfig(number_of_platforms=count, movement=movement)
            print(f"[Benchmark] movement={preset_name}, platforms={count}")
            r = benchmark_configuration(config, world_seed=world_seed, runs=30)

            print_report_row("Runs:", str(r["runs"]))
            print_report_row("Avg gen time:", f"{r['avg_gen_ms']:.2f} ms")
            print_report_row("p95 gen time:", f"{r['p95_gen_ms']:.2f} ms")
            print_report_row("Max gen time:", f"{r['max_gen_ms']:.2f} ms")
            print_report_row("Avg fill ratio:", f"{r['avg_fill']*100:.1f}%")
            print_report_row("Complete layouts:", f"{r['complete_rate']*100:.1f}%")
            print_report_row("Layouts with unreachable platforms:", str(r["unreachable_layouts"]))
            print_report_row("Layouts not connected to start:", str(r["stranded_layouts"]))

            status = ["GEN_OK" if r["avg_gen_ms"] <= GENERATION_TIME_TARGET else "GEN_SLOW"]
            status.append("FILL_OK" if r["avg_fill"] >= FILL_RATE_TARGET else "FILL_LOW")
            status.append("REACH_OK" if r["unreachable_layouts"] == 0 else "REACH_BROKEN")
            print_report_row("Status:", " / ".join(status))
            print("")

    print("=== Tuning Hints ===")
    print("- If FILL_LOW: lower min_platform_spacing or platform_size, or widen the world.")
    print("- If GEN_SLOW: reduce random_attempts_per_iteration or the platform count.")
    print("- If REACH_BROKEN: make sure recheck_directed_reachability is enabled.")
    print("\nDone.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    run_all_benchmarks()
