import logging
import os

from piercecalc import create_app

app = create_app()
debug_mode = os.environ.get('FLASK_DEBUG', '0') == '1'
logging.info(f"Server is running on http://localhost:{app.config['PORT']}")
app.run(host='0.0.0.0', port=app.config['PORT'], debug=debug_mode)
