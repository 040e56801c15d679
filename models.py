from extensions import db
from datetime import datetime
import uuid


def _uuid():
    return str(uuid.uuid4())


class RecordMixin:
    """Plain-dict view of a row, matching what the REST backend returns"""

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}


class Founder(RecordMixin, db.Model):
    __tablename__ = 'founder'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    bio = db.Column(db.Text)
    image = db.Column(db.String(500))


class Service(RecordMixin, db.Model):
    __tablename__ = 'services'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    icon = db.Column(db.String(20))  # symbol key, see utils/icons.py


class PortfolioItem(RecordMixin, db.Model):
    __tablename__ = 'portfolio'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    image = db.Column(db.String(500))
    link = db.Column(db.String(500))
    category = db.Column(db.String(100))  # Web Development, Design, E-commerce, Mobile


class BlogPost(RecordMixin, db.Model):
    __tablename__ = 'blogs'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    content = db.Column(db.Text, default='')
    cover_image = db.Column(db.String(500))
    published_at = db.Column(db.DateTime)  # NULL means draft
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_blogs_published_at', 'published_at'),
    )


class ContactMessage(RecordMixin, db.Model):
    __tablename__ = 'contact_messages'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    project_type = db.Column(db.String(50), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


# Table name -> model, the tables the data client may touch
TABLE_MODELS = {
    model.__tablename__: model
    for model in (Founder, Service, PortfolioItem, BlogPost, ContactMessage)
}
