from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .clockout.factory import CutoverGateFactory
from .clockout.mysql_watermark_repository import MySQLWatermarkRepository
from .clockout.resolver import CutoverResolver
from .clockout.service import AutoClockoutService
from .common.business_calendar import BusinessCalendar
from .core.constants import DEFAULT_BUSINESS_TIMEZONE, DEFAULT_GATE_MODE
from .database.connection import DatabaseConnection, DBConfig
from .stores.mysql_store_repository import MySQLStoreRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    stores_repo: MySQLStoreRepository
    attendance_repo: MySQLAttendanceRepository
    watermarks_repo: MySQLWatermarkRepository

    auto_clockout_service: AutoClockoutService


def build_container(
    *,
    db_config: dict,
    business_timezone: str = DEFAULT_BUSINESS_TIMEZONE,
    gate_mode: str = DEFAULT_GATE_MODE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    stores_repo = MySQLStoreRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    watermarks_repo = MySQLWatermarkRepository(conn)

    calendar = BusinessCalendar(business_timezone)
    gate = CutoverGateFactory().create(
        mode=gate_mode,
        resolver=CutoverResolver(calendar),
        watermarks=watermarks_repo,
    )
    auto_clockout_service = AutoClockoutService(stores_repo, attendance_repo, gate=gate)

    return Container(
        conn=conn,
        stores_repo=stores_repo,
        attendance_repo=attendance_repo,
        watermarks_repo=watermarks_repo,
        auto_clockout_service=auto_clockout_service,
    )
