#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

The server must be started with a bootstrap admin, e.g.:
    BOOTSTRAP_ADMIN_ID=root rolegate-server

Usage:
    export API_URL=http://localhost:8000 BENCH_ADMIN=root
    python scripts/bench_checks.py [--num-users 500] [--num-checks 1000]
"""
from __future__ import annotations

import argparse
import os
import random
import statistics
import sys
import time

import httpx

_PERMISSIONS = ["task:view", "task:create", "skill:publish", "audit:view", "user:delete"]
_ROLES = ["guest", "user", "premium_user", "creator", "approver"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--num-users", type=int, default=200, help="Users to register before checking")
    parser.add_argument("--num-checks", type=int, default=500, help="Number of check requests")
    parser.add_argument("--output", type=str, default="bench_checks.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    admin = os.environ.get("BENCH_ADMIN", "root")
    admin_headers = {"X-User-Id": admin}
    user_ids = [f"bench-{i}" for i in range(args.num_users)]

    print(f"Registering {args.num_users} users...")
    with httpx.Client(timeout=30.0) as client:
        for i, user_id in enumerate(user_ids):
            client.put(
                f"{api_url}/v1/users/{user_id}/permissions",
                json={"roles": [_ROLES[i % len(_ROLES)]]},
                headers=admin_headers,
            ).raise_for_status()

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_checks} check requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_checks):
            user_id = random.choice(user_ids)
            t0 = time.perf_counter()
            r = client.get(
                f"{api_url}/v1/users/{user_id}/check",
                params={"permission": random.choice(_PERMISSIONS)},
                headers={"X-User-Id": user_id},
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful checks.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Check benchmark (users={args.num_users}, checks={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
