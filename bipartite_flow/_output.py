import json

import tabulate

FORMATS = ("plain", "table", "json", "flat")


def format_result(result, fmt="plain", header=True):
    """Render a `MatchResult` as text, one of `FORMATS`."""
    if fmt == "plain":
        return _format_plain(result)
    if fmt == "table":
        return _format_table(result, header)
    if fmt == "json":
        return json.dumps(result.dict(), indent=2)
    if fmt == "flat":
        return "\n".join(_to_flat_format(result.dict()))
    raise ValueError(f"Unknown output format: {fmt}")


def total_line(result):
    return f"{result.size} total matches"


def _format_plain(result):
    lines = [f"{left} / {right}" for left, right in result.named_pairs()]
    lines.append(total_line(result))
    return "\n".join(lines)


def _format_table(result, header):
    pairs = result.named_pairs()
    lines = []
    if pairs:
        headers = ["Left", "Right"] if header else []
        lines.append(tabulate.tabulate(pairs, headers=headers, tablefmt="plain"))
    lines.append(total_line(result))
    return "\n".join(lines)


def _to_flat_format(d, parent_key=""):
    if isinstance(d, dict):
        for k, v in d.items():
            new_key = f"{parent_key}.{k}" if parent_key else k
            yield from _to_flat_format(v, new_key)
    elif isinstance(d, (list, tuple)):
        for i, v in enumerate(d):
            yield from _to_flat_format(v, f"{parent_key}[{i}]")
    else:
        yield f"{parent_key}={json.dumps(d)}"
