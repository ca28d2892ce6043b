"""
Item pricing.

Prices are typed in a compact "thousands" notation (``5`` means 5 000 Ar).
The same conversion is used for the entry total and for every item drawn
in the item grid, so a drawn ``5k`` always adds 5000 to the drawn total.
"""

import math
import re
from decimal import Decimal

UNIT_FACTOR = Decimal(1000)
ITEM_SEPARATOR = '+'

# Leading number of a token; anything after it ("5k", "10 000") is ignored
PRICE_RE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

CURRENCY_SUFFIX = 'Ar'
GIFT_MARKER = '• Kadoa'
ITEM_BULLET = '•'


def split_items(items):
    return items.split(ITEM_SEPARATOR)


def parse_price(token):
    """Parse one price token into Ariary, or None when it is not a number"""
    match = PRICE_RE.match(token.strip())
    if match is None:
        return None
    value = Decimal(match.group())
    if not math.isfinite(float(value)):
        # Out of float range, as the scanned float would be
        return None
    return value * UNIT_FACTOR


def calculate_total(items):
    """Sum every parseable token of an items field; the rest count as zero"""
    total = Decimal(0)
    for token in split_items(items):
        price = parse_price(token)
        if price is not None:
            total += price
    return total


def format_number(amount):
    """Whole units, no decimals, no thousands separator"""
    # Not bound by the context precision
    text = f'{Decimal(amount):.0f}'
    if text == '-0':
        return '0'
    return text


def format_total(amount):
    return f'{format_number(amount)} {CURRENCY_SUFFIX}'


def format_item(price):
    """Grid label for one item; zero priced items are gifts"""
    if price == 0:
        return GIFT_MARKER
    return f'{ITEM_BULLET} {format_number(price / UNIT_FACTOR)}k'
