#!/usr/bin/env python3
"""
Default configuration values for pyrestrict
"""

DEFAULT_CONFIG = {
    'display': {
        # Repeated to the sequence length when no strand text is supplied
        'placeholder': '0123456789',
        'blank': ' ',
    },
    'digest': {
        'max_permutation_actions': 6,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}
