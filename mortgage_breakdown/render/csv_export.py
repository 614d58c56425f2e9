"""CSV download of the monthly schedule."""

import csv
import io

from mortgage_breakdown.engine.amortization import Schedule
from mortgage_breakdown.render.formatting import format_plain

CSV_HEADER = ["Month", "Interest", "Principal", "Balance"]


def render_csv(schedule: Schedule) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADER)
    for e in schedule.entries:
        writer.writerow([
            e.month,
            format_plain(e.interest),
            format_plain(e.principal),
            format_plain(e.balance),
        ])
    return output.getvalue()
