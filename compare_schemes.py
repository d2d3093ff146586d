"""
Multi-seed comparison of the six scheduling schemes.

Uses Common Random Numbers (CRN): for every seed one workload is generated
and replayed against each scheme, so differences between schemes are not
drowned by workload noise. Reports mean ± 95% confidence interval of the
average wait, turnaround and response times.

Usage:
    python compare_schemes.py                      # 4 cores, 20 seeds
    python compare_schemes.py --cores 1 --seeds 5  # Single core
    python compare_schemes.py --base-seed 42       # Reproducible run
    python compare_schemes.py --help               # Show options
"""

import argparse
import csv
import json
import sys
from datetime import datetime

import numpy as np

from schedulers import Scheme
from simulator import Simulator
from workload import generate_jobs

DEBUG = False

METRICS = ['avg_wait', 'avg_turnaround', 'avg_response']


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare CPU scheduling schemes over multiple seeded workloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python compare_schemes.py                          # Default: 4 cores, 20 seeds
  python compare_schemes.py --quantum 2              # Shorter Round Robin slices
  python compare_schemes.py --base-seed 42 --seeds 5 # Reproducible: seeds 42-46
        """
    )
    parser.add_argument('--cores', type=int, default=4,
                        help='Number of cores (default: 4)')
    parser.add_argument('--jobs', type=int, default=50,
                        help='Jobs per workload (default: 50)')
    parser.add_argument('--seeds', type=int, default=20,
                        help='Number of seeds to run (default: 20)')
    parser.add_argument('--base-seed', type=int, default=None,
                        help='Base seed for reproducibility (default: random). Seeds will be base_seed to base_seed+N-1')
    parser.add_argument('--quantum', type=int, default=4,
                        help='Round Robin time quantum (default: 4)')
    parser.add_argument('--arrival-rate', type=float, default=0.5,
                        help='Mean arrivals per time unit (default: 0.5)')
    parser.add_argument('--mean-burst', type=float, default=5.0,
                        help='Mean burst length (default: 5.0)')
    parser.add_argument('--output', default='scheme_comparison',
                        help='Prefix for the JSON and CSV result files (default: scheme_comparison)')
    parser.add_argument('--debug', action='store_true',
                        help='Trace every scheduling decision')

    return parser.parse_args(argv)


def run_single_trial(args, seed, debug=DEBUG):
    """Run all schemes on the same workload (CRN)."""
    arrivals = generate_jobs(
        num_jobs=args.jobs,
        arrival_rate=args.arrival_rate,
        mean_burst=args.mean_burst,
        seed=seed
    )

    results = {}
    for scheme in Scheme:
        sim = Simulator(args.cores, scheme, arrivals, quantum=args.quantum, debug=debug)
        sim.run()
        results[scheme.name] = sim.summary()

    return results


def mean_ci(values):
    """Mean and half-width of the 95% normal confidence interval."""
    values = np.asarray(values, dtype=float)
    mean = float(np.mean(values))
    if len(values) < 2:
        return mean, 0.0
    std_err = np.std(values, ddof=1) / np.sqrt(len(values))
    return mean, float(1.96 * std_err)


def summarize(all_results):
    """
    Collapse per-seed results into summary statistics.

    Returns:
        dict mapping (scheme, metric) -> {'mean', 'ci', 'median'}
    """
    stats = {}
    for scheme_name, per_metric in all_results.items():
        for metric_name in METRICS:
            values = per_metric[metric_name]
            mean, ci = mean_ci(values)
            stats[(scheme_name, metric_name)] = {
                'mean': mean,
                'ci': ci,
                'median': float(np.median(values)),
            }
    return stats


def print_summary(stats):
    print(f"{'Scheme':<8}  {'Avg Wait':>16}  {'Avg Turnaround':>16}  {'Avg Response':>16}")
    print("-" * 64)
    for scheme in Scheme:
        row = f"{scheme.name:<8}"
        for metric_name in METRICS:
            stat = stats[(scheme.name, metric_name)]
            row += f"  {stat['mean']:>9.2f}±{stat['ci']:<6.2f}"
        print(row)


def write_results(prefix, all_results, stats, metadata):
    with open(f"{prefix}.json", 'w') as f:
        json.dump({'metadata': metadata, 'results': all_results}, f, indent=2)

    with open(f"{prefix}.csv", 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Scheme', 'Metric', 'Mean', 'CI95', 'Median'])
        for (scheme_name, metric_name), stat in sorted(stats.items()):
            writer.writerow([
                scheme_name, metric_name,
                f"{stat['mean']:.6f}",
                f"{stat['ci']:.6f}",
                f"{stat['median']:.6f}",
            ])


def main(argv=None):
    args = parse_args(argv)
    if args.cores <= 0 or args.jobs <= 0 or args.seeds <= 0 or args.quantum <= 0:
        print("✗ --cores, --jobs, --seeds and --quantum must be positive", file=sys.stderr)
        return 2

    base_seed = args.base_seed if args.base_seed is not None else int(np.random.randint(0, 2**31 - args.seeds))

    print("=" * 64)
    print(f"Scheme comparison: {args.cores} core(s), {args.jobs} jobs, {args.seeds} seeds (CRN)")
    print(f"Seed range: {base_seed} to {base_seed + args.seeds - 1}, RR quantum: {args.quantum}")
    print("=" * 64)

    all_results = {scheme.name: {metric: [] for metric in METRICS} for scheme in Scheme}
    for seed_idx in range(args.seeds):
        trial = run_single_trial(args, base_seed + seed_idx, debug=args.debug)
        for scheme_name, summary in trial.items():
            for metric_name in METRICS:
                all_results[scheme_name][metric_name].append(summary[metric_name])

    stats = summarize(all_results)
    print_summary(stats)

    metadata = {
        'cores': args.cores,
        'jobs': args.jobs,
        'seeds': args.seeds,
        'base_seed': base_seed,
        'quantum': args.quantum,
        'arrival_rate': args.arrival_rate,
        'mean_burst': args.mean_burst,
        'timestamp': datetime.now().isoformat(),
    }
    write_results(args.output, all_results, stats, metadata)
    print(f"\n✓ Results saved to {args.output}.json and {args.output}.csv")
    print(f"  Reproducibility: Run with --base-seed {base_seed} to recreate")
    return 0


if __name__ == "__main__":
    sys.exit(main())
