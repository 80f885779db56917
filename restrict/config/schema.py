#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List


class ConfigSchema:
    """Configuration schema for validation"""

    SCHEMA = {
        'display': {
            'placeholder': {'type': str, 'required': True},
            'blank': {'type': str, 'required': False},
        },
        'digest': {
            'max_permutation_actions': {'type': int, 'required': True},
        },
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
    }

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for section, fields in cls.SCHEMA.items():
            if section not in config:
                if any(props.get('required', False) for props in fields.values()):
                    errors.append(f"Missing required configuration section: {section}")
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if field not in section_config:
                    if props.get('required', False):
                        errors.append(f"Missing required configuration field: {section}.{field}")
                    continue

                expected_type = props['type']
                value = section_config[field]
                # bool is an int subclass; a flag is never a count
                if isinstance(value, bool) and expected_type is not bool:
                    valid = False
                else:
                    valid = isinstance(value, expected_type)
                if not valid:
                    errors.append(
                        f"Invalid type for {section}.{field}: expected {expected_type.__name__}, "
                        f"got {type(value).__name__}"
                    )

        display = config.get('display')
        if isinstance(display, dict):
            if display.get('placeholder') == '':
                errors.append("display.placeholder must not be empty")
            blank = display.get('blank')
            if isinstance(blank, str) and len(blank) != 1:
                errors.append("display.blank must be a single character")

        digest = config.get('digest')
        if isinstance(digest, dict):
            limit = digest.get('max_permutation_actions')
            if isinstance(limit, int) and not isinstance(limit, bool) and limit < 0:
                errors.append("digest.max_permutation_actions must not be negative")

        return errors
