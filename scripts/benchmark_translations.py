#!/usr/bin/env python3
"""Run performance benchmarks on translation list, search and export.

Each operation runs 5 times; an average under 200ms is reported as PASS.
Export runs go through the configured cache, so only the first run of each
format is a cold read.
"""

import sys
import os
import time

# Add parent directory to path to import localehub modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from localehub import create_app
from localehub.services import translations as translation_service
from localehub.services.cache import get_cache
from localehub.services.export import ExportOptions, export_translations

ITERATIONS = 5
THRESHOLD_MS = 200


def benchmark(name, callback):
    times = []
    for _ in range(ITERATIONS):
        start = time.perf_counter()
        callback()
        times.append((time.perf_counter() - start) * 1000)

    avg_time = sum(times) / len(times)
    status = 'PASS' if avg_time < THRESHOLD_MS else 'SLOW'
    print(f"[{status}] {name}: Avg: {avg_time:.2f}ms, Min: {min(times):.2f}ms, Max: {max(times):.2f}ms")
    return avg_time


def main():
    app = create_app(os.getenv('FLASK_ENV', 'development'))

    with app.app_context():
        cache = get_cache()
        print("Running Translation Service Benchmarks...\n")

        benchmark('List Translations (50 per page)',
                  lambda: translation_service.get_paginated(per_page=50))
        benchmark('Search Translations',
                  lambda: translation_service.search(locale='en', content='welcome'))
        benchmark('Export Translations (flat)',
                  lambda: export_translations(ExportOptions(locale='en', format='flat'), cache))
        benchmark('Export Translations (nested)',
                  lambda: export_translations(ExportOptions(locale='en', format='nested'), cache))

        print("\nBenchmarks completed!")


if __name__ == '__main__':
    main()
