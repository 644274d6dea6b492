"""
Data models — Page, Block, ThemePreset, MediaAsset, ContactSubmission
SQLAlchemy (SQLite) + Pydantic v2
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# ── ENUMS ──────────────────────────────────────────────────────────────

class PageStatus(str, Enum):
    DRAFT     = "draft"
    PUBLISHED = "published"


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class PageDB(Base):
    __tablename__ = "pages"
    id:         Mapped[str]      = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    slug:       Mapped[str]      = mapped_column(sa.String, nullable=False)
    brand:      Mapped[str]      = mapped_column(sa.String, nullable=False, default="physiotherapy")
    status:     Mapped[str]      = mapped_column(sa.String, nullable=False, default="draft")
    title:      Mapped[str]      = mapped_column(sa.String, nullable=False, default="")
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    blocks: Mapped[List["BlockDB"]] = relationship(
        "BlockDB", back_populates="page", cascade="all, delete-orphan",
        order_by=lambda: [BlockDB.sort, BlockDB.row_id],
    )

    __table_args__ = (
        sa.UniqueConstraint("slug", "brand", name="uq_page_slug_brand"),
    )


class BlockDB(Base):
    __tablename__ = "blocks"
    # row_id : compteur d'insertion, départage les `sort` égaux
    row_id:  Mapped[int]            = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    id:      Mapped[str]            = mapped_column(sa.String, nullable=False, index=True)
    page_id: Mapped[str]            = mapped_column(sa.String, sa.ForeignKey("pages.id", ondelete="CASCADE"), nullable=False, index=True)
    type:    Mapped[str]            = mapped_column(sa.String, nullable=False)
    sort:    Mapped[int]            = mapped_column(sa.Integer, nullable=False, default=0)
    props:   Mapped[Dict[str, Any]] = mapped_column(sa.JSON, nullable=False, default=dict)

    page: Mapped["PageDB"] = relationship("PageDB", back_populates="blocks")

    __table_args__ = (
        sa.UniqueConstraint("page_id", "id", name="uq_block_page_id"),
    )


class ThemePresetDB(Base):
    __tablename__ = "theme_presets"
    id:        Mapped[str]            = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    brand:     Mapped[str]            = mapped_column(sa.String, nullable=False)
    name:      Mapped[str]            = mapped_column(sa.String, nullable=False)
    tokens:    Mapped[Dict[str, Any]] = mapped_column(sa.JSON, nullable=False, default=dict)
    is_active: Mapped[bool]           = mapped_column(sa.Boolean, default=False)


class MediaAssetDB(Base):
    __tablename__ = "media_assets"
    id:         Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    object_key: Mapped[str]           = mapped_column(sa.String, nullable=False)
    alt:        Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)


class ContactSubmissionDB(Base):
    __tablename__ = "contact_submissions"
    id:         Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    brand:      Mapped[str]           = mapped_column(sa.String, nullable=False)
    page_id:    Mapped[str]           = mapped_column(sa.String, nullable=False, index=True)
    block_id:   Mapped[str]           = mapped_column(sa.String, nullable=False)
    recipient:  Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    name:       Mapped[str]           = mapped_column(sa.String, nullable=False)
    email:      Mapped[str]           = mapped_column(sa.String, nullable=False)
    phone:      Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    subject:    Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    message:    Mapped[str]           = mapped_column(sa.Text, nullable=False, default="")
    consent:    Mapped[bool]          = mapped_column(sa.Boolean, default=False)
    status:     Mapped[str]           = mapped_column(sa.String, nullable=False, default="new")
    created_at: Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class Block(BaseModel):
    """Un bloc de page : `props` reste le JSON stocké, typé à la lecture par le registre."""
    id:    str
    type:  str
    props: Dict[str, Any] = Field(default_factory=dict)
    sort:  int            = 0


class AdminUser(BaseModel):
    email: str


class BlockIn(BaseModel):
    id:    str
    type:  str
    props: Optional[Dict[str, Any]] = None


class PageCreate(BaseModel):
    title:  str
    slug:   str
    brand:  str        = "physiotherapy"
    status: PageStatus = PageStatus.DRAFT


class PageSave(BaseModel):
    """Payload de PUT /api/admin/pages/{id} — remplace la page et toute sa liste de blocs."""
    id:     str
    title:  str
    slug:   str
    brand:  str
    status: PageStatus
    blocks: List[BlockIn] = Field(default_factory=list)
