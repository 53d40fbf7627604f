from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text, func


metadata = MetaData()

reservation = Table(
    "reservation",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # ISO-8601 UTC instant, e.g. 2017-06-10T06:02:00.000Z
    Column("datetime", String(24), nullable=False),
    Column("party", Integer, nullable=False),
    Column("name", String(200), nullable=False),
    Column("email", String(254), nullable=False),
    Column("message", Text, nullable=True),
    Column("phone", String(32), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
