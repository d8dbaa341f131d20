"""
Mobile inventory persistent storage.
"""

import logging
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional, Set, TypeVar

from .errors import StorageError, StorageErrorKind
from .models import Mobile

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

T = TypeVar("T")


class MobileStore:
    """
    Persistent storage for mobile records using SQLite.

    The store permits duplicate IMEIs; uniqueness is checked by callers
    (see InventoryService). Every call opens and closes its own connection.
    """

    def __init__(
        self,
        db_path: str,
        retry_attempts: int = 2,
        retry_delay: float = 0.1,
        busy_timeout: float = 5.0,
    ):
        """
        Initialize mobile store.

        Args:
            db_path: Path to SQLite database file
            retry_attempts: Extra attempts for writes that fail with a
                transient error such as a locked database
            retry_delay: Seconds to sleep between attempts
            busy_timeout: Seconds SQLite waits on a lock before failing
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.retry_attempts = retry_attempts
        self.retry_delay = retry_delay
        self.busy_timeout = busy_timeout
        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path, timeout=self.busy_timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._connect() as conn, conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS mobiles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    imei TEXT NOT NULL,
                    model TEXT NOT NULL
                )
            """)

            # Not unique: duplicate detection is an application policy
            conn.execute("CREATE INDEX IF NOT EXISTS idx_mobiles_imei ON mobiles(imei)")

            conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")

        logger.info(f"Initialized mobile database at {self.db_path}")

    def _write(self, action: str, imei: str, operation: Callable[[sqlite3.Connection], T]) -> T:
        """
        Run a write inside a transaction, retrying transient failures.

        The transaction is rolled back on any error, so a failed write
        leaves the database unchanged.

        Raises:
            StorageError: WRITE_FAILED once attempts are exhausted or on a
                non-transient database error
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                with self._connect() as conn, conn:
                    return operation(conn)
            except sqlite3.OperationalError as e:
                if attempt <= self.retry_attempts:
                    logger.warning(
                        f"Failed to {action} mobile {imei} "
                        f"(attempt {attempt}/{self.retry_attempts + 1}): {e}"
                    )
                    time.sleep(self.retry_delay)
                    continue
                logger.error(f"Giving up on {action} of mobile {imei}: {e}")
                raise StorageError(
                    StorageErrorKind.WRITE_FAILED,
                    f"Could not {action} mobile {imei}: {e}",
                    imei=imei,
                ) from e
            except sqlite3.Error as e:
                logger.error(f"Failed to {action} mobile {imei}: {e}")
                raise StorageError(
                    StorageErrorKind.WRITE_FAILED,
                    f"Could not {action} mobile {imei}: {e}",
                    imei=imei,
                ) from e

    def get_all(self) -> Set[Mobile]:
        """
        Get every stored mobile.

        Returns:
            Set of mobiles, empty if the store is empty
        """
        with self._connect() as conn:
            rows = conn.execute("SELECT id, imei, model FROM mobiles").fetchall()

        return {self._row_to_mobile(dict(row)) for row in rows}

    def find_by_imei(self, imei: str) -> Optional[Mobile]:
        """
        Find the first mobile whose IMEI contains the given text.

        This is a case-sensitive substring search, not an exact match.
        Rows are scanned in insertion order.

        Args:
            imei: Full IMEI or any part of it

        Returns:
            Mobile or None if nothing matches
        """
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, imei, model FROM mobiles WHERE instr(imei, ?) > 0 ORDER BY id LIMIT 1",
                (imei,),
            ).fetchone()

        if not row:
            return None

        return self._row_to_mobile(dict(row))

    def save(self, mobile: Mobile) -> Mobile:
        """
        Persist a mobile as a new row.

        Args:
            mobile: Mobile to save

        Returns:
            The persisted mobile, carrying its row id

        Raises:
            StorageError: If the insert could not be committed
        """
        def insert(conn: sqlite3.Connection) -> int:
            cursor = conn.execute(
                "INSERT INTO mobiles (imei, model) VALUES (?, ?)",
                (mobile.imei, mobile.model),
            )
            return cursor.lastrowid

        row_id = self._write("save", mobile.imei, insert)

        logger.debug(f"Saved mobile: {mobile.imei} (id={row_id})")
        return mobile.model_copy(update={"id": row_id})

    def delete(self, imei: str) -> int:
        """
        Delete the mobiles with the given IMEI.

        Args:
            imei: Exact IMEI to delete

        Returns:
            Number of rows removed

        Raises:
            StorageError: NOT_FOUND if no row has this IMEI, WRITE_FAILED if
                the delete could not be committed
        """
        def remove(conn: sqlite3.Connection) -> int:
            cursor = conn.execute("DELETE FROM mobiles WHERE imei = ?", (imei,))
            if cursor.rowcount == 0:
                raise StorageError(
                    StorageErrorKind.NOT_FOUND,
                    f"No mobile with IMEI {imei}",
                    imei=imei,
                )
            return cursor.rowcount

        removed = self._write("delete", imei, remove)

        logger.debug(f"Deleted {removed} mobile(s) with IMEI {imei}")
        return removed

    def exists(self, imei: str) -> bool:
        """Check whether any stored mobile has exactly this IMEI."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT 1 FROM mobiles WHERE imei = ? LIMIT 1", (imei,)
            ).fetchone()
        return row is not None

    def count(self) -> int:
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM mobiles").fetchone()[0]

    def schema_version(self) -> int:
        with self._connect() as conn:
            return conn.execute("PRAGMA user_version").fetchone()[0]

    def _row_to_mobile(self, row: Dict) -> Mobile:
        """Convert database row to Mobile model."""
        return Mobile(id=row["id"], imei=row["imei"], model=row["model"])
