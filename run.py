"""Run the storefront development server."""

import os

from storefront import create_app

app = create_app(os.environ.get('FLASK_CONFIG'))

if __name__ == '__main__':
    app.run(host=os.environ.get('HOST', '127.0.0.1'),
            port=int(os.environ.get('PORT', 5000)))
