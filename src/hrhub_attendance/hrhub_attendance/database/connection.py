from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DBConfig":
        return cls(
            host=str(values.get("host", "localhost")),
            port=int(values.get("port", 3306)),
            user=str(values["user"]),
            password=str(values.get("password", "")),
            database=str(values["database"]),
        )


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: Report queries open short-lived connections per repository call.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error:
            logger.error(
                "Cannot connect to %s@%s:%s/%s",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
            )
            raise
