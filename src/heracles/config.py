"""
Client configuration.

Configuration can be built in code, from a dictionary, or from a JSON file
shaped like ``config.sample.json``:

    {
        "client": {"remove_hypermedia_from_payload": true, "timeout": 10},
        "logging": {"level": "DEBUG", "format": "json"}
    }
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from .constants import ClientDefaults


@dataclass
class ClientConfig:
    """Configuration for the Hydra client."""
    remove_hypermedia_from_payload: bool = ClientDefaults.REMOVE_HYPERMEDIA_FROM_PAYLOAD
    timeout: int = ClientDefaults.TIMEOUT_SECONDS
    headers: Dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    logging: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ClientConfig':
        """Create ClientConfig from a dictionary."""
        client_config = config_dict.get('client', config_dict)
        return cls(
            remove_hypermedia_from_payload=bool(client_config.get(
                'remove_hypermedia_from_payload', ClientDefaults.REMOVE_HYPERMEDIA_FROM_PAYLOAD
            )),
            timeout=int(client_config.get('timeout', ClientDefaults.TIMEOUT_SECONDS)),
            headers=dict(client_config.get('headers', {})),
            verify_ssl=bool(client_config.get('verify_ssl', True)),
            logging=dict(config_dict.get('logging', {})),
        )

    @classmethod
    def from_file(cls, config_path: str) -> 'ClientConfig':
        """Load configuration from a JSON file."""
        if not config_path:
            raise ValueError("config_path cannot be empty")

        if not isinstance(config_path, str):
            raise TypeError(f"config_path must be string, got {type(config_path)}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(
                f"Configuration file not found: {config_path}. "
                f"See config.sample.json for the expected layout."
            )
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except UnicodeDecodeError as e:
            raise ValueError(f"Encoding error reading {config_path}: {e}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading {config_path}")
        except OSError as e:
            raise IOError(f"Error reading configuration file {config_path}: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file must contain a JSON object, got {type(config_dict)}")

        return cls.from_dict(config_dict)
