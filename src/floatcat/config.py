"""
Floatcat Configuration
======================
Static settings for float categories. Single source of truth for the
variant descriptions returned by Category.describe().

Usage:
    from floatcat.config import CONFIG
    text = CONFIG['descriptions']['integer_like']
"""

CONFIG = {

    # =================================================================
    # Variant Descriptions (keyed by Kind value)
    # =================================================================
    'descriptions': {
        'integer_like': (
            'No fractional part, like 1.0 or -100.0. '
            'Can usually be cast to an integer without losing information.'
        ),
        'fraction_like': (
            'No integer part, like 0.5 or -0.002. '
            'Casting to an integer would discard the whole value.'
        ),
        'integer_and_fractional_part': (
            'Both an integer part and a fractional part, like 1.5.'
        ),
        'nan': 'Not-a-Number.',
        'infinity': 'Positive or negative infinity.',
    },
}


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('descriptions.nan')       → 'Not-a-Number.'
        get('descriptions.missing')   → None
    """
    node = CONFIG
    for key in path.split('.'):
        try:
            node = node[key]
        except (KeyError, TypeError):
            return default
    return node
