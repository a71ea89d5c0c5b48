"""Body sensor network simulation, data fusion, logging, injection and repository components."""

__version__ = "0.1.0"

__all__ = [
    "battery",
    "data_access",
    "generator",
    "injector",
    "logger",
    "messages",
    "patient",
    "processor",
    "ranges",
    "timedata",
    "utils",
]