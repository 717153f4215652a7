"""Allow ``python -m tomlreadme FILEPATH``."""
from tomlreadme.pipeline.cli import main

if __name__ == "__main__":
    main()
