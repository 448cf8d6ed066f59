import logging
import os

from transapi import create_app

logging.basicConfig(level=logging.INFO)

config_name = os.getenv('FLASK_ENV', 'development')
app = create_app(config_name)

if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))

    # Never run debug mode in production
    debug_mode = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes')

    # The reloader would start a second export worker
    app.run(host='0.0.0.0', port=port, debug=debug_mode, use_reloader=False)
