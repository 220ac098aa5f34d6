"""Report builder — text and JSON output for tw-matcher results."""

import json
from typing import Any

from tw_matcher.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.command == 'lookup':
        # One hex per line, easy to pipe
        return '\n'.join(data['hex'] for data in report.items.values())

    if report.command == 'palette':
        for name, data in report.items.items():
            L, a, b = data['lab']
            lines.append(f'{name:<14} {data["hex"]:<8} L={L:.2f} a={a:.2f} b={b:.2f}')
        lines.append(f'{len(report.items)} colours ({report.palette_source})')
        return '\n'.join(lines)

    for key, data in report.items.items():
        lines.append(f'── {key}')
        if 'closest' in data:
            mark = ''
            if 'pass' in data:
                mark = '  ✓' if data['pass'] else '  ✗'
            lines.append(f'  closest: {data["closest"]} {data["closest_hex"]}  ΔE00={data["distance"]}{mark}')
            lines.append(f'  {data["description"]}')
            if 'file' in data:
                lines.append(f'  saved: {data["file"]}')
        elif 'description' in data:
            lines.append(f'  {data["first"]} → {data["second"]}  ΔE00={data["distance"]}')
            lines.append(f'  {data["description"]}')
        elif 'top' in data:
            parts = [f'{c["name"]}:{c["pct"]:.1f}%' for c in data['top']]
            lines.append(f'  census ({data["samples"]} px): {", ".join(parts)}')
        elif 'dominant' in data:
            for c in data['dominant']:
                lines.append(
                    f'  {c["hex"]} {c["pct"]:>5.1f}%  → {c["closest"]} {c["closest_hex"]}  ΔE00={c["distance"]}'
                )
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'palette': {'source': report.palette_source, 'size': report.palette_size},
        'results': [{'key': key, **data} for key, data in report.items.items()],
    }
    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {'total': total, 'pass': report.pass_count, 'fail': report.fail_count}
    return json.dumps(obj, indent=2)
