from pathlib import Path

from hydra.utils import instantiate
from omegaconf import OmegaConf

CONFIG_PATH = Path(__file__).parent / "conf" / "config.yaml"


def load_config(path=None, overrides=()):
    """Load app config.

    Parameters
    ----------
    path : str or pathlib.Path
        Yaml file. Defaults to the packaged config.
    overrides : list[str]
        Dotlist overrides, e.g. ``counters.default.max_value=3``.

    Returns
    -------
    cfg : omegaconf.DictConfig
    """
    cfg = OmegaConf.load(path or CONFIG_PATH)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))

    return cfg


def key_value_instantiate(key, value, key_name=None):
    kwargs = {} if key_name is None else {key_name: key}

    return instantiate(value, **kwargs)


def instantiate_dict_from_config(cfg, instantiate_func=None):
    if instantiate_func is None:
        instantiate_func = key_value_instantiate

    dict_ = {}
    for key, value in cfg.items():
        dict_[key] = value if isinstance(value, bool) else instantiate_func(key, value)

    return dict_


def load_counters(counters_cfg):
    # syntax sugar
    # NB: keys are widget ids
    return instantiate_dict_from_config(counters_cfg)
