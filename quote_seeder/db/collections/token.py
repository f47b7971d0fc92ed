"""
The tokens collection

createdAt and updatedAt are stored as BSON dates rather than date strings, the
backend reading this collection decodes them as time values.
"""
from datetime import datetime, timezone
from typing import List

from mongoengine import Document, StringField, IntField, FloatField, BooleanField, DateTimeField
from mongoengine.errors import OperationError
from pymongo.errors import PyMongoError

from quote_seeder.util.exceptions import WriteError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Token(Document):
    symbol = StringField(required=True)
    contract_address = StringField(required=True, db_field='contractAddress')  # checksummed
    decimals = IntField(required=True, min_value=0)
    make_fee = FloatField(db_field='makeFee')  # set for quote tokens only
    take_fee = FloatField(db_field='takeFee')
    quote = BooleanField(required=True, default=True)
    created_at = DateTimeField(required=True, default=utc_now, db_field='createdAt')
    updated_at = DateTimeField(required=True, default=utc_now, db_field='updatedAt')

    meta = {'collection': 'tokens'}

    @classmethod
    def insert_many(cls, documents: List['Token']) -> int:
        """Writes the documents in a single batch, returns the number of inserted documents"""
        if not documents:
            return 0
        try:
            ids = cls.objects.insert(documents, load_bulk=False)
        except (OperationError, PyMongoError) as e:
            raise WriteError(f'Failed inserting {len(documents)} tokens: {e}') from e
        return len(ids)

    def __repr__(self):
        kind = 'quote' if self.quote else 'base'
        return f"<Token {self.symbol} ({kind}) at {self.contract_address}>"
