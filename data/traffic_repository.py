"""
Repository for the append-only traffic log and its rolling aggregations.
"""

import sqlite3
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Dict, List
from .db import Database
from .models import TrafficRecord
from core.exceptions import DatabaseError
from config.constants import TIMESTAMP_FORMAT, HOUR_BUCKET_FORMAT

class TrafficRepository:
    """
    Inserts synthetic traffic records and answers the dashboard's read queries.

    Records are never updated or deleted. Every aggregation is recomputed from
    the table on each call; window boundaries are derived from ``now`` (UTC)
    and compared against the stored ``YYYY-MM-DD HH:MM:SS`` timestamps.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    def insert_record(self, record: TrafficRecord) -> TrafficRecord:
        """Persist a record and return it with its assigned id."""
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO traffic_logs
                        (timestamp, source_ip, destination_ip, domain, protocol, upload_bytes, download_bytes)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.timestamp,
                        record.source_ip,
                        record.destination_ip,
                        record.domain,
                        record.protocol,
                        record.upload_bytes,
                        record.download_bytes,
                    ),
                )
                record_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to insert traffic record: {e}")
        return replace(record, id=record_id)

    def get_totals(self, now: datetime, days: int) -> Dict[str, int]:
        query = """
        SELECT
            COALESCE(SUM(upload_bytes), 0) as total_upload,
            COALESCE(SUM(download_bytes), 0) as total_download,
            COUNT(*) as total_packets
        FROM traffic_logs
        WHERE timestamp > ?
        """
        result = self.db.execute_query(query, (_cutoff(now, timedelta(days=days)),))
        return result[0]

    def get_top_domains(self, limit: int) -> List[Dict[str, Any]]:
        # MIN(id) keeps ties in first-insertion order
        query = """
        SELECT domain, SUM(upload_bytes + download_bytes) as total_bytes
        FROM traffic_logs
        GROUP BY domain
        ORDER BY total_bytes DESC, MIN(id) ASC
        LIMIT ?
        """
        return self.db.execute_query(query, (limit,))

    def get_protocol_counts(self) -> List[Dict[str, Any]]:
        query = """
        SELECT protocol, COUNT(*) as count
        FROM traffic_logs
        GROUP BY protocol
        ORDER BY MIN(id) ASC
        """
        return self.db.execute_query(query)

    def get_hourly_history(self, now: datetime, hours: int) -> List[Dict[str, Any]]:
        query = f"""
        SELECT
            strftime('{HOUR_BUCKET_FORMAT}', timestamp) as hour,
            SUM(upload_bytes) as upload,
            SUM(download_bytes) as download
        FROM traffic_logs
        WHERE timestamp > ? AND timestamp <= ?
        GROUP BY hour
        ORDER BY hour ASC
        """
        params = (_cutoff(now, timedelta(hours=hours)), now.strftime(TIMESTAMP_FORMAT))
        return self.db.execute_query(query, params)

    def get_recent_records(self, limit: int) -> List[TrafficRecord]:
        query = "SELECT * FROM traffic_logs ORDER BY timestamp DESC, id DESC LIMIT ?"
        return [TrafficRecord.from_row(row) for row in self.db.execute_query(query, (limit,))]

    def get_record_count(self) -> int:
        result = self.db.execute_query("SELECT COUNT(*) as count FROM traffic_logs")
        return result[0]['count'] if result else 0

def _cutoff(now: datetime, window: timedelta) -> str:
    return (now - window).strftime(TIMESTAMP_FORMAT)
