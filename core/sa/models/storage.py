from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class StoredFile(Base, CreatedAtMixin):
    """Metadata for a blob kept in the storage directory under its id"""
    __tablename__ = 'stored_file'

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)

    user = relationship('User', back_populates='stored_files')

    __table_args__ = (
        Index('idx_stored_file_user', 'user_id'),
    )
