# app/database.py
"""
Simple file-backed document store. Each collection is one CSV file holding
one row per document: the document id, its JSON body and a last-modified
timestamp. All reads and writes of a collection file happen under a file lock
so concurrent commits cannot corrupt or drop each other's rows.

Handlers never touch the store directly; they work through a request-scoped
DocumentSession (unit of work):

    session = store.open_session()
    session.store(product)            # assigns a uuid4 id if missing
    await session.save_changes()
    product = await session.load(Product, product_id)
    products = await session.query(Product, lambda p: "shoes" in p.category)
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set, Type, TypeVar

import pandas as pd
from fastapi.concurrency import run_in_threadpool
from filelock import FileLock

from app.config import settings
from app.core.exceptions import DocumentStoreError

logger = logging.getLogger(__name__)

COLUMNS = ["id", "data", "last_modified"]

D = TypeVar("D")


class DocumentStore:
    """
    Manages the collection files inside `data_dir`.
    Collection name maps to a file name from settings, else `<collection>.csv`.
    """

    def __init__(self, data_dir: Path = settings.DATA_DIR):
        self.data_dir = Path(data_dir)

    def _file_path(self, collection: str) -> Path:
        mapping = {
            "products": settings.PRODUCTS_FILE,
        }
        filename = mapping.get(collection, f"{collection}.csv")
        return self.data_dir / Path(filename)

    def _lock_for(self, path: Path) -> FileLock:
        return FileLock(str(path) + ".lock")

    def _read_df_nolock(self, path: Path) -> pd.DataFrame:
        """
        Read a collection file WITHOUT acquiring the file lock.
        Use this only when the caller already holds the lock.
        """
        if not path.exists():
            return pd.DataFrame(columns=COLUMNS)
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=COLUMNS)
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise DocumentStoreError(f"Cannot read collection file {path}: {e}") from e
        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise DocumentStoreError(f"Collection file {path} is missing columns: {missing}")
        return df[COLUMNS].copy()

    def _write_df_nolock(self, path: Path, df: pd.DataFrame) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)

    def _read_df(self, collection: str) -> pd.DataFrame:
        path = self._file_path(collection)
        if not path.exists():
            return pd.DataFrame(columns=COLUMNS)
        with self._lock_for(path):
            return self._read_df_nolock(path)

    @staticmethod
    def _decode(doc_id: str, body: str) -> Dict[str, Any]:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise DocumentStoreError(f"Document {doc_id} has a corrupt body") from e
        data["id"] = doc_id
        return data

    # --- low-level primitives (blocking) ---

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        df = self._read_df(collection)
        if df.empty:
            return None
        rows = df[df["id"] == str(doc_id)]
        if rows.empty:
            return None
        row = rows.iloc[0]
        return self._decode(row["id"], row["data"])

    def list_documents(self, collection: str) -> List[Dict[str, Any]]:
        df = self._read_df(collection)
        return [self._decode(r["id"], r["data"]) for r in df.to_dict(orient="records")]

    def count(self, collection: str) -> int:
        return len(self._read_df(collection))

    def commit(self, collection: str, upserts: Dict[str, Dict[str, Any]], deletes: Set[str]) -> None:
        """
        Apply a batch of upserts and deletes to one collection atomically:
        read, merge and write all happen under the collection's file lock.
        Existing rows keep their position; new documents are appended.
        """
        if not upserts and not deletes:
            return
        path = self._file_path(collection)
        path.parent.mkdir(parents=True, exist_ok=True)
        now = datetime.now(timezone.utc).isoformat()
        with self._lock_for(path):
            df = self._read_df_nolock(path)
            if deletes:
                df = df[~df["id"].isin(deletes)].copy()
            new_rows = []
            for doc_id, data in upserts.items():
                body = json.dumps({k: v for k, v in data.items() if k != "id"})
                mask = df["id"] == doc_id
                if mask.any():
                    df.loc[mask, "data"] = body
                    df.loc[mask, "last_modified"] = now
                else:
                    new_rows.append({"id": doc_id, "data": body, "last_modified": now})
            if new_rows:
                added = pd.DataFrame(new_rows, columns=COLUMNS)
                df = added if df.empty else pd.concat([df, added], ignore_index=True)
            self._write_df_nolock(path, df)
        logger.debug("Committed %d upserts, %d deletes to %s", len(upserts), len(deletes), collection)

    def open_session(self) -> "DocumentSession":
        return DocumentSession(self)


class DocumentSession:
    """
    Request-scoped unit of work. `store` and `delete` only stage changes;
    `save_changes` writes them. Reads always go to the store, so staged
    changes are not visible until committed.
    """

    def __init__(self, store: DocumentStore):
        self._store = store
        self._upserts: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._deletes: Dict[str, Set[str]] = {}

    @property
    def has_changes(self) -> bool:
        return any(self._upserts.values()) or any(self._deletes.values())

    def store(self, document: Any) -> None:
        if document.id is None:
            document.id = uuid.uuid4()
        doc_id = str(document.id)
        collection = document.collection
        self._deletes.get(collection, set()).discard(doc_id)
        self._upserts.setdefault(collection, {})[doc_id] = document.to_dict()

    def delete(self, doc_type: Type[Any], doc_id: Any) -> None:
        collection = doc_type.collection
        self._upserts.get(collection, {}).pop(str(doc_id), None)
        self._deletes.setdefault(collection, set()).add(str(doc_id))

    async def save_changes(self) -> None:
        for collection in set(self._upserts) | set(self._deletes):
            upserts = self._upserts.pop(collection, {})
            deletes = self._deletes.pop(collection, set())
            await run_in_threadpool(self._store.commit, collection, upserts, deletes)

    async def load(self, doc_type: Type[D], doc_id: Any) -> Optional[D]:
        data = await run_in_threadpool(self._store.get_document, doc_type.collection, str(doc_id))
        if data is None:
            return None
        return doc_type.from_dict(data)

    async def query(self, doc_type: Type[D], where: Optional[Callable[[D], bool]] = None) -> List[D]:
        rows = await run_in_threadpool(self._store.list_documents, doc_type.collection)
        docs = [doc_type.from_dict(r) for r in rows]
        if where is None:
            return docs
        return [d for d in docs if where(d)]


# module-level singleton for convenience
store = DocumentStore()
