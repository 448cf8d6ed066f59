"""Language model. Languages are registered up front, never created by imports."""

from transapi import db


class Language(db.Model):
    __tablename__ = 'language'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    code = db.Column(db.String(20), unique=True, nullable=False, index=True)  # e.g. 'fr', 'pt-BR'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'code': self.code,
        }

    def __repr__(self):
        return f'<Language {self.code}: {self.name}>'
