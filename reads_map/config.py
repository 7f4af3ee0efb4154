import copy
from pathlib import Path

import yaml

DEFAULTS = {
    'format': 'text',
    'text': {
        'min_label_width': 20,
    },
    'html': {
        'base_width': 8,
        'title': 'Reads Alignment Visualization',
    },
    'fasta': {
        'line_width': 60,
    },
}

def merge(defaults, overrides):
    ''' Returns a copy of defaults updated with overrides. Keys in overrides
    that don't appear in defaults are errors.
    '''
    merged = copy.deepcopy(defaults)

    for key, value in overrides.items():
        if key not in defaults:
            raise ValueError(f'unknown configuration key: {key}')

        if isinstance(defaults[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f'configuration section {key} must be a mapping')
            merged[key] = merge(defaults[key], value)
        elif type(value) is not type(defaults[key]):
            raise ValueError(f'configuration key {key} must be {type(defaults[key]).__name__}')
        else:
            merged[key] = value

    return merged

def load_config(config_fn=None):
    if config_fn is None:
        return copy.deepcopy(DEFAULTS)

    overrides = yaml.safe_load(Path(config_fn).read_text())

    if overrides is None:
        overrides = {}
    elif not isinstance(overrides, dict):
        raise ValueError(f'{config_fn} must contain a YAML mapping')

    return merge(DEFAULTS, overrides)
