import argparse
import os
import sys

from world_stats.flattenStats import flatten_world_stats
from world_stats.loadStats import load_world_stats
from world_stats.locateStatsFiles import FILE_PATTERN, STATS_DIR_NAME, locate_stats_files
from world_stats.reportStats import TOP_N, render_report

# Configuration
BASE_DIR = os.environ.get('WORLD_STATS_BASE_DIR', r'\\MINECRAFTSERVER\Minecraft Server')
TARGET_ITEM = os.environ.get('WORLD_STATS_ITEM', 'minecraft:lantern')

# Limit processing during testing
TEST_MODE = os.environ.get('WORLD_STATS_TEST_MODE', '').lower() in ('1', 'true', 'yes')
TEST_LIMIT = 5

FATAL = "The specified directory does not exist or is unreachable."


def main(base_dir=BASE_DIR, item=TARGET_ITEM, pattern=FILE_PATTERN,
         stats_dir_name=STATS_DIR_NAME, test_mode=TEST_MODE,
         test_limit=TEST_LIMIT, top=TOP_N, log=print) -> int:
    # the root has to be listable, not just present
    try:
        with os.scandir(base_dir):
            pass
    except OSError:
        log(FATAL)
        return 1

    # 1) find every stats file
    log(f"Searching for JSON files in '{stats_dir_name}' directories...")
    limit = test_limit if test_mode else None
    try:
        paths = list(locate_stats_files(base_dir, pattern, stats_dir_name, limit))
    except OSError:
        log(FATAL)
        return 1
    if test_mode:
        log(f"Test mode active: processing first {test_limit} JSON file(s).")
    log(f"Found {len(paths)} JSON file(s).")

    # 2) world -> uuid -> entry, then one row per stat
    store = load_world_stats(paths, log=log)
    records = flatten_world_stats(store)

    # 3) report
    for line in render_report(records, item, top):
        log(line)
    return 0


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    return n


def build_parser():
    # string defaults go through `type`, so bad env values get a usage error too
    p = argparse.ArgumentParser(
        description="Report the top per-player values of one statistic across all worlds.")
    p.add_argument('--base-dir',       default=BASE_DIR,
                   help='server root to search for stats directories')
    p.add_argument('--item',           default=TARGET_ITEM,
                   help='statistic key to report, e.g. minecraft:lantern')
    p.add_argument('--pattern',        default=FILE_PATTERN,
                   help='file name glob for stats files (matched ignoring case)')
    p.add_argument('--stats-dir-name', default=STATS_DIR_NAME,
                   help='name of the directory holding per-player stats files')
    p.add_argument('--test-mode',      action=argparse.BooleanOptionalAction, default=TEST_MODE,
                   help='only process the first --test-limit files')
    p.add_argument('--test-limit',     type=positive_int,
                   default=os.environ.get('WORLD_STATS_TEST_LIMIT', str(TEST_LIMIT)),
                   help='number of files processed in test mode')
    p.add_argument('--top',            type=positive_int,
                   default=os.environ.get('WORLD_STATS_TOP', str(TOP_N)),
                   help='maximum rows shown per category')
    return p


def cli(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return main(args.base_dir, args.item, args.pattern, args.stats_dir_name,
                args.test_mode, args.test_limit, args.top)


if __name__ == '__main__':
    sys.exit(cli())
