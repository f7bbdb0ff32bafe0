"""
Full-text index over shop names.

Backed by an SQLite FTS5 virtual table that lives next to the relational
tables; the FTS rowid is the shop id. The index is kept in sync by the shop
service on every write and rebuilt from scratch on application startup.
"""

import logging
import re
from typing import List

from sqlalchemy import text
from sqlalchemy.orm import Session

from shopapp.models.shop import Shop

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\w+", re.UNICODE)


class ShopSearchIndex:
    def __init__(self, table_name: str = "shops_fts"):
        self.table_name = table_name

    def ensure_index(self, db: Session) -> None:
        """Create the FTS table if it does not exist yet."""
        db.execute(
            text(f"CREATE VIRTUAL TABLE IF NOT EXISTS {self.table_name} USING fts5(name)")
        )

    def index_shop(self, db: Session, shop: Shop) -> None:
        """Insert or replace the index entry of a persisted shop."""
        self.remove_shop(db, shop.id)
        db.execute(
            text(f"INSERT INTO {self.table_name}(rowid, name) VALUES (:id, :name)"),
            {"id": shop.id, "name": shop.name},
        )

    def remove_shop(self, db: Session, shop_id: int) -> None:
        db.execute(
            text(f"DELETE FROM {self.table_name} WHERE rowid = :id"), {"id": shop_id}
        )

    def match_name(self, db: Session, name: str) -> List[int]:
        """
        Return ids of every shop whose name matches any word of ``name``,
        best match first. Matching is case-insensitive.
        """
        tokens = WORD_PATTERN.findall(name or "")
        if not tokens:
            return []
        # Quote each token so user input never reaches the FTS query syntax
        match_query = " OR ".join(f'"{token}"' for token in tokens)
        rows = db.execute(
            text(
                f"SELECT rowid FROM {self.table_name} "
                f"WHERE {self.table_name} MATCH :query ORDER BY rank"
            ),
            {"query": match_query},
        ).all()
        return [row[0] for row in rows]

    def reindex_all(self, db: Session) -> int:
        """Rebuild the whole index from the shops table. Returns the shop count."""
        self.ensure_index(db)
        db.execute(text(f"DELETE FROM {self.table_name}"))
        count = 0
        for shop_id, name in db.query(Shop.id, Shop.name).order_by(Shop.id).all():
            db.execute(
                text(f"INSERT INTO {self.table_name}(rowid, name) VALUES (:id, :name)"),
                {"id": shop_id, "name": name},
            )
            count += 1
        db.commit()
        logger.info(f"Search index rebuilt with {count} shops")
        return count


shop_search_index = ShopSearchIndex()
