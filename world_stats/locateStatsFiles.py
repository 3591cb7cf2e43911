from fnmatch import fnmatchcase
from itertools import islice
from pathlib import Path

STATS_DIR_NAME = 'stats'
FILE_PATTERN = '*.json'


def locate_stats_files(base_dir, pattern=FILE_PATTERN, stats_dir_name=STATS_DIR_NAME, limit=None):
    """
    Yield absolute paths of files under base_dir matching pattern whose
    immediate parent directory is named stats_dir_name. Both the pattern and
    the directory name are matched ignoring case, as on the Windows share the
    server writes to. With limit set, only the first `limit` matches are yielded.
    """
    wanted_dir, wanted_name = stats_dir_name.lower(), pattern.lower()
    found = (
        path for path in Path(base_dir).absolute().rglob('*')
        if path.parent.name.lower() == wanted_dir
        and fnmatchcase(path.name.lower(), wanted_name)
        and path.is_file()
    )
    if limit is not None:
        found = islice(found, limit)
    yield from found
