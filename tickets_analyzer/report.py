from datetime import timedelta

from tickets_analyzer.kpis import RouteSummary

HEADER = "Минимальное время полета по перевозчикам:"


def format_duration(duration: timedelta) -> str:
    """
    Renders a duration as "<H>ч <M>м".

    Hours are total hours, not wrapped at 24. For negative durations the sign
    goes on the hours and the minutes are a magnitude: -90 min is "-1ч 30м".
    """
    total_minutes = int(duration.total_seconds() / 60)
    sign = "-" if total_minutes < 0 else ""
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours}ч {minutes}м"


def render_report(summary: RouteSummary) -> str:
    lines = [HEADER]
    for carrier in sorted(summary.min_by_carrier):
        lines.append(f"{carrier}: {format_duration(summary.min_by_carrier[carrier])}")

    lines.append("")
    lines.append(f"Среднее время полета: {int(summary.average)} минут")
    lines.append(f"Медианное время полета: {int(summary.median)} минут")
    lines.append(f"Разница (среднее - медиана): {summary.difference} минут")
    return "\n".join(lines)


def render_not_found(origin: str, destination: str) -> str:
    return f"Билеты по маршруту {origin} → {destination} не найдены."
