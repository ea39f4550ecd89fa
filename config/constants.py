"""
Default values for the traffic simulator and the settings row.
All of them can be overridden through the environment (see app_config).
"""

class GeneratorDefaults:
    """Demo constants used when no generator configuration is supplied."""

    DOMAINS = (
        "google.com",
        "github.com",
        "youtube.com",
        "netflix.com",
        "amazon.com",
        "facebook.com",
        "twitter.com",
        "reddit.com",
        "microsoft.com",
        "apple.com",
    )
    PROTOCOLS = ("HTTPS", "HTTP", "DNS", "TCP", "UDP")

    INTERVAL_SECONDS = 2.0
    MAX_UPLOAD_BYTES = 50000
    MAX_DOWNLOAD_BYTES = 500000

    SOURCE_PREFIX = "192.168.1."
    DESTINATION_PREFIX = "104.26.12."
    MAX_HOST_OCTET = 254

class SettingsDefaults:
    """Initial values of the singleton settings row."""

    DATA_LIMIT_GB = 100.0
    ALERTS_ENABLED = True

class AggregationWindows:
    """Rolling windows used by the aggregation queries."""

    SUMMARY_DAYS = 30
    HISTORY_HOURS = 24
    TOP_DOMAINS_LIMIT = 5
    RECENT_DEFAULT_LIMIT = 50
    RECENT_MAX_LIMIT = 500

BYTES_PER_GB = 1024 ** 3
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
HOUR_BUCKET_FORMAT = "%Y-%m-%d %H:00:00"
