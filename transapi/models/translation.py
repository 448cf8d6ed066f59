"""Translation model - the content of one string in one language."""

from transapi import db


class Translation(db.Model):
    __tablename__ = 'translation'

    id = db.Column(db.Integer, primary_key=True)
    string_id = db.Column(db.Integer, db.ForeignKey('string.id', ondelete='CASCADE'), nullable=False, index=True)
    language_id = db.Column(db.Integer, db.ForeignKey('language.id'), nullable=False)
    content = db.Column(db.Text, nullable=False, default='')

    # At most one translation per string per language
    __table_args__ = (
        db.UniqueConstraint('string_id', 'language_id', name='unique_translation_per_language'),
    )

    string = db.relationship('TranslationString', back_populates='translations')
    language = db.relationship('Language', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'language': self.language.code if self.language else None,
            'content': self.content,
        }

    def __repr__(self):
        return f'<Translation string_id={self.string_id} language_id={self.language_id}>'
