from collections import defaultdict

TOP_N = 10000
RULE_WIDTH = 160
ROW_FORMAT = "{:<20} {:<36} {:<20} {:<20} {:<8} {}"
HEADER = ("World", "UUID", "Category", "Item", "Value", "File Path")


def filter_by_item(records, item):
    target = item.lower()
    return [r for r in records if r.item.lower() == target]


def group_by_category(records):
    """
    Partition records by category; groups come back as (category, records)
    pairs in ordinal order of the category name, records in encounter order.
    """
    groups = defaultdict(list)
    for r in records:
        groups[r.category].append(r)
    return sorted(groups.items(), key=lambda g: g[0])


def rank_key(record):
    # highest value first; equal values ordered by uuid, then world, then path
    return (-record.value, record.uuid.lower(), record.world.lower(), str(record.path))


def top_records(records, top=TOP_N):
    return sorted(records, key=rank_key)[:top]


def format_row(record):
    return ROW_FORMAT.format(record.world, record.uuid, record.category,
                             record.item, record.value, record.path)


def render_report(records, item, top=TOP_N) -> list[str]:
    """
    Filter the flat records down to `item` and render the grouped table,
    one block per category, followed by the total match count.
    """
    matched = filter_by_item(records, item)
    lines = ["", f"Results for item: {item}"]
    for category, group in group_by_category(matched):
        lines += ["", f"Category: {category}", ROW_FORMAT.format(*HEADER), '-' * RULE_WIDTH]
        lines += [format_row(r) for r in top_records(group, top)]
    lines += ["", f"Total records for {item}: {len(matched)}"]
    return lines
