from .commands import diskinformer_cli


if __name__ == '__main__':
    diskinformer_cli()
