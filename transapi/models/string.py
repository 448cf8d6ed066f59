"""String model - one translatable key, unique within its domain."""

from transapi import db


class TranslationString(db.Model):
    __tablename__ = 'string'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    domain_id = db.Column(db.Integer, db.ForeignKey('domain.id', ondelete='CASCADE'), nullable=False, index=True)

    # String names only need to be unique inside their domain
    __table_args__ = (
        db.UniqueConstraint('name', 'domain_id', name='unique_string_per_domain'),
    )

    domain = db.relationship('Domain', back_populates='strings')
    translations = db.relationship(
        'Translation',
        back_populates='string',
        order_by='Translation.id',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'translations': [t.to_dict() for t in self.translations],
        }

    def __repr__(self):
        return f'<TranslationString {self.name} domain_id={self.domain_id}>'
