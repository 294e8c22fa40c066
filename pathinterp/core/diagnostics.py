"""Snapshots of the latest messages on the planner's input feeds.

Dumps are a logging side effect only: nothing here feeds back into the
interpolation results.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, Union

import numpy as np
import yaml
from dataclasses_json import DataClassJsonMixin
from loguru import logger


class DataFeed(Protocol):
    """Anything that can dump its most recent message."""
    
    def dump_latest_message(self) -> Any:
        ...


class LatestMessageFeed:
    """Feed that keeps its latest message and dumps it as YAML.
    
    Args:
        name: Feed name, used as the dump file stem
        dump_dir: Directory receiving ``<name>.yaml`` on dump
    """
    
    def __init__(self, name: str, dump_dir: Union[str, Path]):
        self.name = name
        self.dump_dir = Path(dump_dir)
        self._latest: Optional[Any] = None
    
    @property
    def has_message(self) -> bool:
        return self._latest is not None
    
    @property
    def latest_message(self) -> Optional[Any]:
        return self._latest
    
    def publish(self, message: Any) -> None:
        """Record message as the latest on this feed."""
        self._latest = message
    
    def dump_latest_message(self) -> Optional[Path]:
        """Write the latest message to disk.
        
        Returns:
            Path of the written file, or None when no message was published
        """
        if self._latest is None:
            logger.warning(f"No message on feed '{self.name}' to dump")
            return None
        
        # Serialize first so a failed dump never leaves a truncated file
        text = yaml.safe_dump(_to_plain(self._latest), default_flow_style=False)
        
        self.dump_dir.mkdir(parents=True, exist_ok=True)
        dump_path = self.dump_dir / f"{self.name}.yaml"
        with open(dump_path, 'w') as f:
            f.write(text)
        
        logger.info(f"Dumped latest '{self.name}' message to {dump_path}")
        return dump_path


def _to_plain(message: Any) -> Any:
    """Reduce a message to the plain types yaml.safe_dump accepts."""
    if isinstance(message, DataClassJsonMixin):
        message = message.to_dict()
    elif dataclasses.is_dataclass(message) and not isinstance(message, type):
        message = dataclasses.asdict(message)
    
    if isinstance(message, dict):
        return {_to_plain(k): _to_plain(v) for k, v in message.items()}
    if isinstance(message, (list, tuple)):
        return [_to_plain(v) for v in message]
    if isinstance(message, np.ndarray):
        return message.tolist()
    if isinstance(message, np.generic):
        return message.item()
    return message


@dataclass
class PlanningFeeds:
    """Input feeds whose latest messages are dumped with the planning context."""
    localization: DataFeed
    chassis: DataFeed
    routing_response: DataFeed
    prediction: Optional[DataFeed] = None
    
    @classmethod
    def create(cls, dump_dir: Union[str, Path]) -> 'PlanningFeeds':
        """Create one LatestMessageFeed per input, all dumping into dump_dir."""
        return cls(
            localization=LatestMessageFeed('localization', dump_dir),
            chassis=LatestMessageFeed('chassis', dump_dir),
            routing_response=LatestMessageFeed('routing_response', dump_dir),
            prediction=LatestMessageFeed('prediction', dump_dir),
        )


def dump_planning_context(feeds: PlanningFeeds, enable_prediction: bool) -> None:
    """Dump the latest localization, chassis and routing messages.
    
    The prediction feed is dumped only when enable_prediction is set.
    """
    feeds.localization.dump_latest_message()
    feeds.chassis.dump_latest_message()
    feeds.routing_response.dump_latest_message()
    if enable_prediction:
        if feeds.prediction is None:
            logger.warning("Prediction is enabled but no prediction feed is attached")
        else:
            feeds.prediction.dump_latest_message()
