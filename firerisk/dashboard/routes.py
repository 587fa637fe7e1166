"""
Dashboard Routes

Fire risk dashboard page, its JSON view and the generated data files.
"""

from flask import current_app, jsonify, render_template, send_from_directory
from firerisk.dashboard import dashboard_bp
from firerisk.dashboard.services import get_dashboard_view, NO_DATA_MESSAGE, NEXT_UPDATES


@dashboard_bp.route('/')
def dashboard():
    """Main dashboard showing zone cards and summary statistics"""
    view = get_dashboard_view(current_app.config)
    return render_template('dashboard/dashboard.html',
                         view=view,
                         no_data_message=NO_DATA_MESSAGE,
                         next_updates=NEXT_UPDATES,
                         refresh_interval=current_app.config['REFRESH_INTERVAL'])


@dashboard_bp.route('/api/dashboard')
def api_dashboard():
    """Dashboard view as JSON, same refresh as the page"""
    return jsonify(get_dashboard_view(current_app.config).to_dict())


@dashboard_bp.route('/data/<path:filename>')
def data_file(filename):
    """Serve the generated snapshot and backup files"""
    response = send_from_directory(current_app.config['DATA_DIR'], filename)
    response.headers['Cache-Control'] = 'no-cache'
    return response
