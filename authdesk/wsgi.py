# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from authdesk.app import create_app
from authdesk.shared.config import load_config

app = create_app()


def main() -> None:
    config = load_config()
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
