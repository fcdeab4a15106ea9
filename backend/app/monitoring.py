from prometheus_client import Counter, Histogram
import time

# Define Prometheus metrics
REQUEST_COUNT = Counter(
    "http_request_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status"]
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"]
)

SURVEY_COUNT = Counter(
    "survey_created_total",
    "Total number of surveys created"
)

ANSWER_COUNT = Counter(
    "answer_submitted_total",
    "Total number of answers submitted"
)

DUPLICATE_ANSWER_COUNT = Counter(
    "duplicate_answer_total",
    "Total number of rejected duplicate answer submissions"
)

STATS_LATENCY = Histogram(
    "survey_stats_duration_seconds",
    "Survey stats computation latency in seconds"
)

class TimerContextManager:
    def __init__(self, histogram, labels=None):
        self.histogram = histogram
        self.labels = labels

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if self.labels:
            self.histogram.labels(*self.labels).observe(duration)
        else:
            self.histogram.observe(duration)
