from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    String,
    Table,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


class Base(DeclarativeBase):
    pass


creator_industries = Table(
    "creator_industries",
    Base.metadata,
    Column(
        "creator_id",
        ForeignKey("creators.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "industry_id",
        ForeignKey("industries.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(String, nullable=False)

    creators: Mapped[list[Creator]] = relationship(
        "Creator", back_populates="country"
    )


class Industry(Base):
    __tablename__ = "industries"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(String, nullable=False)

    creators: Mapped[list[Creator]] = relationship(
        "Creator", secondary=creator_industries, back_populates="industries"
    )


class Creator(Base):
    __tablename__ = "creators"
    __table_args__ = (
        Index("ix_creators_visibility_follower_count", "visibility", "follower_count"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    nickname: Mapped[str | None]
    avatar_url: Mapped[str | None]
    visibility: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        doc="Only visible creators are ever returned by the API",
    )
    follower_count: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
        doc="Sole sort key of creator searches (descending)",
    )

    # Engagement counters arrive from ingestion as text and are coerced on read
    view_count: Mapped[str | None] = mapped_column(String, nullable=True)
    like_count: Mapped[str | None] = mapped_column(String, nullable=True)
    comment_count: Mapped[str | None] = mapped_column(String, nullable=True)
    share_count: Mapped[str | None] = mapped_column(String, nullable=True)

    country_id: Mapped[str | None] = mapped_column(
        ForeignKey("countries.id"), nullable=True, index=True
    )

    country: Mapped[Country | None] = relationship(
        "Country", back_populates="creators"
    )
    industries: Mapped[list[Industry]] = relationship(
        "Industry", secondary=creator_industries, back_populates="creators"
    )


__all__ = ["Base", "Country", "Creator", "Industry", "creator_industries"]
