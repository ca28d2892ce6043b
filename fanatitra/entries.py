"""
Delivery entries pasted from a spreadsheet.

One line per customer, tab separated:
    ID <tab> Name <tab> Address <tab> Phone <tab> Items [<tab> Notes]

Malformed lines are dropped rather than reported; the text comes straight
from a paste box and a stray line must not block the rest of the receipt.
"""

import logging
from dataclasses import dataclass

from fanatitra.pricing import calculate_total, split_items

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = '\t'
REQUIRED_FIELDS = 5


@dataclass
class DeliveryEntry:
    id: str
    name: str
    address: str
    phone: str
    items: str
    notes: str = ''

    def total(self):
        return calculate_total(self.items)

    def item_tokens(self):
        return [token.strip() for token in split_items(self.items)]


def parse_content(content):
    """Parse tab separated lines into delivery entries, in input order"""
    entries = []
    for number, line in enumerate(content.split('\n'), start=1):
        line = line.rstrip('\r')
        if line == '':
            continue

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < REQUIRED_FIELDS:
            logger.debug("Skipping line %d: %d fields", number, len(fields))
            continue
        if all(not field.strip() for field in fields[:REQUIRED_FIELDS]):
            logger.debug("Skipping line %d: no content", number)
            continue

        entry = DeliveryEntry(*fields[:REQUIRED_FIELDS])
        if len(fields) > REQUIRED_FIELDS:
            entry.notes = fields[REQUIRED_FIELDS]
        entries.append(entry)

    return entries
