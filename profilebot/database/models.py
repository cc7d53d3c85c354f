from sqlalchemy import (
    Column, Integer, String, DateTime, Float, BigInteger, ForeignKey, CheckConstraint
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

class Country(Base):
    __tablename__ = 'countries'

    code = Column(String(2), primary_key=True)  # ISO 3166-1 alpha-2
    name = Column(String(100), nullable=False)

    users = relationship("User", back_populates="country")

    def __repr__(self):
        return f"<Country(code='{self.code}', name='{self.name}')>"

class User(Base):
    __tablename__ = 'users'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    username = Column(String(100), nullable=False, index=True)
    profile_slug = Column(String(100), nullable=True)

    # Presentation
    title = Column(String(200), nullable=True)
    colour = Column(String(9), nullable=True)  # Hex, with or without '#'
    avatar_url = Column(String(500), nullable=True)
    country_code = Column(String(2), ForeignKey('countries.code'), nullable=True)
    support_level = Column(Integer, default=0, nullable=False)

    # Metadata
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Relationships
    country = relationship("Country", back_populates="users", lazy="joined")
    statistics = relationship(
        "UserStatisticsRow", back_populates="user", uselist=False,
        lazy="joined", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint('support_level >= 0', name='ck_users_support_level_non_negative'),
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"

class UserStatisticsRow(Base):
    __tablename__ = 'user_statistics'

    user_id = Column(BigInteger, ForeignKey('users.id'), primary_key=True)
    ranked_score = Column(BigInteger, default=0, nullable=False)
    hit_accuracy = Column(Float, default=0.0, nullable=False)  # Percentage, 0-100
    play_count = Column(Integer, default=0, nullable=False)
    total_score = Column(BigInteger, default=0, nullable=False)
    total_hits = Column(BigInteger, default=0, nullable=False)
    max_combo = Column(Integer, default=0, nullable=False)
    replays_watched = Column(Integer, default=0, nullable=False)

    user = relationship("User", back_populates="statistics")

    def __repr__(self):
        return f"<UserStatisticsRow(user_id={self.user_id}, ranked_score={self.ranked_score})>"
