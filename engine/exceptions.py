# engine/exceptions.py

class AnalyticsError(Exception):
    pass


class InsufficientDataError(AnalyticsError):
    pass


class DegenerateSeriesError(AnalyticsError):
    pass
