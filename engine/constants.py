from __future__ import annotations

# record keys tried in order when normalizing caller records; the first truthy
# value wins, mirroring how the dashboard aggregates are shaped
VALUE_FIELDS = ("value", "totalKwh", "powerConsumption")
TIMESTAMP_FIELDS = ("timestamp", "_id", "date")

# raw sensor readings carry instantaneous consumption under this key
READING_VALUE_FIELDS = ("powerConsumption", "value", "totalKwh")

# Sunday=0 .. Saturday=6, the bucket numbering used on the wire
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
WEEKEND_DAYS = frozenset({0, 6})

UNAVAILABLE_MESSAGE = "Insufficient historical data"
