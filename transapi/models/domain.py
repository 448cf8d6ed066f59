"""Domain model - a named collection of translatable strings."""

from transapi import db


class Domain(db.Model):
    __tablename__ = 'domain'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False, index=True)

    # Rows are removed by the ON DELETE CASCADE on string.domain_id
    strings = db.relationship(
        'TranslationString',
        back_populates='domain',
        order_by='TranslationString.id',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    def to_dict(self, include_strings=False):
        result = {
            'id': self.id,
            'name': self.name,
        }
        if include_strings:
            result['strings'] = [s.to_dict() for s in self.strings]
        return result

    def __repr__(self):
        return f'<Domain {self.name}>'
