"""Russian formatting of single-unit ISO 8601 periods.

The duration layer turns `P{n}D` / `P{n}M` / `P{n}Y` strings into Russian phrases such as
"2 дня" and back into `(count, unit)` pairs. Duration syntax itself is parsed by `isodate`.
"""
