import click


@click.group()
def diskinformer_cli():
    pass
