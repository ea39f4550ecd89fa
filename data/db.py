import os
import queue
import sqlite3
import threading
from typing import Dict, Tuple

from core.exceptions import DatabaseError
from core.types import DatabaseResult

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), 'schema.sql')

class Database:
    """Handles all low-level interactions with the SQLite database."""

    # Connection pools per database file
    _pools: Dict[str, queue.Queue] = {}
    _locks: Dict[str, threading.Lock] = {}
    _registry_lock = threading.Lock()

    def __init__(self, db_file: str) -> None:
        """Initialize the database connection and pool."""

        self.db_file = os.path.abspath(db_file)
        db_dir = os.path.dirname(self.db_file)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        # Ensure a pool exists for this database file
        with Database._registry_lock:
            if self.db_file not in Database._locks:
                Database._locks[self.db_file] = threading.Lock()
        self._ensure_pool()

    # Internal helpers -------------------------------------------------

    def _ensure_pool(self) -> None:
        """Create a connection pool for the database file if needed."""
        if self.db_file in Database._pools:
            return
        with Database._locks[self.db_file]:
            if self.db_file in Database._pools:
                return
            pool = queue.Queue(maxsize=self._calculate_pool_size())
            for _ in range(pool.maxsize):
                conn = sqlite3.connect(self.db_file, check_same_thread=False)
                conn.row_factory = sqlite3.Row
                pool.put(conn)
            Database._pools[self.db_file] = pool

    def _get_from_pool(self) -> sqlite3.Connection:
        self._ensure_pool()
        return Database._pools[self.db_file].get()

    def _return_to_pool(self, conn: sqlite3.Connection) -> None:
        pool = Database._pools.get(self.db_file)
        if pool is None:
            # Pool was closed while the connection was checked out
            conn.close()
            return
        pool.put(conn)

    def _calculate_pool_size(self) -> int:
        """Determine an appropriate connection pool size."""
        cores = os.cpu_count() or 1
        return max(2, min(20, cores * 2))

    def execute_query(self, query: str, params: Tuple = ()) -> DatabaseResult:
        """
        Executes a given SQL query (e.g., SELECT, INSERT, UPDATE).
        For queries that modify data, this method handles commit and rollback.

        Args:
            query (str): The SQL query to execute.
            params (tuple): The parameters to substitute into the query.

        Returns:
            list: A list of rows for SELECT queries, otherwise an empty list.
        """
        conn = self._get_from_pool()
        try:
            cursor = conn.cursor()
            cursor.execute(query, params)

            if query.strip().upper().startswith("SELECT"):
                result: DatabaseResult = [dict(row) for row in cursor.fetchall()]
                return result
            else:
                conn.commit()
                return []
        except sqlite3.Error as e:
            conn.rollback()
            raise DatabaseError(f"Database query failed: {e}")
        finally:
            self._return_to_pool(conn)

    def execute_script(self, script: str) -> None:
        """
        Executes a multi-statement SQL script.

        Args:
            script (str): The SQL script to execute.
        """
        conn = self._get_from_pool()
        try:
            conn.executescript(script)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise DatabaseError(f"Database script execution failed: {e}")
        finally:
            self._return_to_pool(conn)

    def initialize_schema(self) -> None:
        """Create the dashboard tables if absent and seed the settings row."""
        with open(SCHEMA_FILE, 'r') as f:
            self.execute_script(f.read())

    def get_connection(self):
        """
        Returns a context manager for database connections.
        Commits on success and rolls back when the block raises.
        """
        class ConnectionContext:
            def __init__(self, db_instance):
                self.db = db_instance
                self.conn = None

            def __enter__(self):
                self.conn = self.db._get_from_pool()
                return self.conn

            def __exit__(self, exc_type, exc_val, exc_tb):
                if self.conn:
                    if exc_type:
                        self.conn.rollback()
                    else:
                        self.conn.commit()
                    self.db._return_to_pool(self.conn)
                    self.conn = None

        return ConnectionContext(self)

    def close_pool(self) -> None:
        """Close every pooled connection for this database file."""
        with Database._locks[self.db_file]:
            pool = Database._pools.pop(self.db_file, None)
        if pool is None:
            return
        while not pool.empty():
            pool.get_nowait().close()
