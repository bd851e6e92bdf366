from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_TEACHER = ("Demo Teacher", "teacher@example.com", "teacher123")
DEMO_STUDENTS = (
    ("Student One", "student1@example.com", "student123", "R1"),
    ("Student Two", "student2@example.com", "student123", "R2"),
    ("Student Three", "student3@example.com", "student123", "R3"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ``;`` outside quotes; ``--`` line comments are dropped."""

    buf: list[str] = []
    in_single = False
    in_double = False
    in_comment = False
    escape = False
    prev = ""

    for ch in sql:
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            prev = ch
            continue

        if escape:
            buf.append(ch)
            escape = False
            prev = ch
            continue

        if ch == "\\" and (in_single or in_double):
            buf.append(ch)
            escape = True
            prev = ch
            continue

        if ch == "-" and prev == "-" and not in_single and not in_double:
            buf.pop()
            in_comment = True
            prev = ""
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            prev = ch
            continue

        buf.append(ch)
        prev = ch

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in iter_sql_statements(sql):
        cur.execute(stmt)


def _factory(db_config: dict) -> DatabaseConnection:
    # Bootstrap runs before the app container exists; use a private factory.
    return DatabaseConnection(DBConfig.from_dict(db_config))


def ensure_database_exists(db_config: dict) -> None:
    factory = _factory(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path)


def ensure_demo_users(db_config: dict) -> None:
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_user(name: str, email: str, password: str, role: Role, roll_number: Optional[str]) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE email=%s", (email,))
            if cur.fetchone():
                cur.execute(
                    """
                    UPDATE users
                    SET name=%s, password_hash=%s, role=%s, roll_number=%s
                    WHERE email=%s
                    """,
                    (name, password_hash, role.value, roll_number, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users (name, email, password_hash, role, roll_number)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (name, email, password_hash, role.value, roll_number),
                )

        name, email, password = DEMO_TEACHER
        upsert_user(name, email, password, Role.TEACHER, None)
        for name, email, password, roll_number in DEMO_STUDENTS:
            upsert_user(name, email, password, Role.STUDENT, roll_number)

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo users ready (1 teacher, %d students)", len(DEMO_STUDENTS))


def list_tables(db_config: dict) -> list[str]:
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
