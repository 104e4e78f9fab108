import click
from .base import diskinformer_cli
from diskinformer.exceptions import InformerConfigError
from diskinformer.informer.disk import DiskConfig, rpc_method_for


def _load_config(config_file, apply_env=False):
    config = DiskConfig()
    try:
        config.load_json(config_file.read())
        if apply_env:
            config.apply_env_vars()
    except InformerConfigError as e:
        raise click.ClickException(str(e))
    return config


@diskinformer_cli.group("disk")
def disk_group():
    pass


@disk_group.command(name="default")
def show_default():
    config = DiskConfig()
    config.default()
    click.echo(config.to_json().decode())


@disk_group.command(name="validate")
@click.option("--config-file", type=click.File("r"), required=True)
@click.option("--apply-env", is_flag=True)
def validate_config(config_file, apply_env):
    config = _load_config(config_file, apply_env=apply_env)
    click.echo(config.to_json().decode())


@disk_group.command(name="rpc")
@click.option("--config-file", type=click.File("r"), required=True)
def show_rpc(config_file):
    config = _load_config(config_file)
    click.echo(rpc_method_for(config.metric_type))
