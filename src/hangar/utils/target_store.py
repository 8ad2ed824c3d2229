import os
import json
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
from datetime import datetime
import keyring
from keyring.errors import PasswordDeleteError

from hangar.constants import DEFAULT_TEAM, TOKEN_SERVICE_TEMPLATE


@dataclass
class Target:
    """A CI server endpoint plus the team and token used against it"""

    name: str
    api_url: str
    team_name: str = DEFAULT_TEAM
    insecure: bool = False
    token: Optional[str] = None

    def validate(self) -> None:
        """Raise ValueError if the target cannot be used for API calls"""
        if not self.api_url:
            raise ValueError(f"target '{self.name}' has no API URL")
        if not self.token:
            raise ValueError(f"not logged in to target '{self.name}'")


class TargetStore:
    def __init__(self):
        self.base_dir = self._get_config_dir()
        self.targets_file = self.base_dir / "targets.json"
        self.current_target_file = self.base_dir / "current_target"
        self.settings_file = self.base_dir / "settings.json"
        self._ensure_config_dir()

    def _get_config_dir(self) -> Path:
        """Get platform-specific config directory"""
        system = platform.system()
        if system == "Windows":
            base_dir = os.environ.get("APPDATA", "")
            return Path(base_dir) / "hangar"
        elif system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "hangar"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
            if xdg_config:
                return Path(xdg_config) / "hangar"
            return Path.home() / ".hangar"

    def _ensure_config_dir(self):
        os.makedirs(self.base_dir, exist_ok=True)

    def _write_targets(self, targets: Dict) -> None:
        with open(self.targets_file, "w", encoding="utf-8") as f:
            json.dump(targets, f, indent=2)

    def get_targets(self) -> Dict:
        """Get all saved targets (without tokens)"""
        if not self.targets_file.exists():
            return {}
        try:
            with open(self.targets_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}

    def save_target(self, target: Target) -> None:
        """Save target settings; the token goes to the system keyring"""
        targets = self.get_targets()
        now = datetime.now().isoformat()
        created_at = targets.get(target.name, {}).get("created_at", now)
        targets[target.name] = {
            "name": target.name,
            "api_url": target.api_url.rstrip("/"),
            "team_name": target.team_name,
            "insecure": target.insecure,
            "created_at": created_at,
            "updated_at": now,
        }
        self._write_targets(targets)

        if target.token:
            self.store_token(target.name, target.token)

    def get_target(self, name: str) -> Optional[Target]:
        """Load a target with its token, or None if it is not saved"""
        data = self.get_targets().get(name)
        if not data:
            return None
        return Target(
            name=name,
            api_url=data.get("api_url", ""),
            team_name=data.get("team_name", DEFAULT_TEAM),
            insecure=bool(data.get("insecure", False)),
            token=self.get_token(name),
        )

    def delete_target(self, name: str) -> None:
        targets = self.get_targets()
        if name in targets:
            del targets[name]
            self._write_targets(targets)

        try:
            keyring.delete_password(TOKEN_SERVICE_TEMPLATE.format(target=name), "token")
        except PasswordDeleteError:
            pass

        if self.get_current_target() == name:
            self.current_target_file.unlink()

    def set_current_target(self, name: str) -> None:
        with open(self.current_target_file, "w", encoding="utf-8") as f:
            f.write(name)

    def get_current_target(self) -> Optional[str]:
        if not self.current_target_file.exists():
            return None
        try:
            with open(self.current_target_file, "r", encoding="utf-8") as f:
                return f.read().strip() or None
        except IOError:
            return None

    def store_token(self, name: str, token: str) -> None:
        """Store the bearer token for a target in the system keyring"""
        keyring.set_password(TOKEN_SERVICE_TEMPLATE.format(target=name), "token", token)

    def get_token(self, name: str) -> Optional[str]:
        return keyring.get_password(TOKEN_SERVICE_TEMPLATE.format(target=name), "token")
