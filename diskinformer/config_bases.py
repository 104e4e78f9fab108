from abc import ABC, abstractmethod
from pydantic_settings import BaseSettings, SettingsConfigDict
from pprint import pformat
from os import environ


class ComponentConfig(ABC):
    """
    Contract shared by every component config held in the cluster configuration

    A config is located in the persisted document by its config_key, can reset itself to defaults,
    and round-trips through JSON. Deciding when to persist it is up to the caller.
    """
    @abstractmethod
    def config_key(self):
        pass

    @abstractmethod
    def default(self):
        pass

    @abstractmethod
    def validate(self):
        pass

    @abstractmethod
    def load_json(self, raw, logger=None):
        pass

    @abstractmethod
    def to_json(self):
        pass

    @abstractmethod
    def apply_env_vars(self):
        pass


class InformerConfigBase(BaseSettings):
    model_config = SettingsConfigDict(env_file=environ.get('DISKINFORMER_CONFIG_DOTENV', None), extra='ignore')

    def __str__(self):
        return pformat(self.model_dump(), indent=4)
