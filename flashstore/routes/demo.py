"""Demo routes showing the flash lifecycle"""

from datetime import datetime, timezone
from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from flashstore.flash import get_flash
from flashstore.utils.flash_helpers import FlashKind, flash

bp = Blueprint('demo', __name__)


@bp.route('/')
def index():
    """Page rendering whatever flash reached this request"""
    return render_template('demo/index.html', page_title='Flash demo', messages=get_flash())


@bp.route('/profile', methods=['GET', 'POST'])
def profile():
    """Profile form; a successful update flashes and redirects"""
    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        if not name:
            # Rendered directly, so this flash is dropped when the response is finalised
            flash('Name is required', FlashKind.ERROR)
            return render_template('demo/profile.html', page_title='Profile'), 400

        current_app.logger.debug(f"Profile updated for {name}")
        flash('Profile updated', FlashKind.INFO)
        return redirect(url_for('demo.index'))

    return render_template('demo/profile.html', page_title='Profile')


@bp.route('/handoff')
def handoff():
    """Carry a welcome flash across the redirect in a signed cookie"""
    response = redirect(url_for('demo.index'))
    store = current_app.extensions['flashstore'].store
    return store.set_cookie(response, {FlashKind.INFO.value: 'Welcome'})


@bp.route('/health')
def health_check():
    """Health check endpoint for monitoring"""
    settings = current_app.extensions['flashstore']
    status = {
        'status': 'healthy',
        'signed_cookie': settings.signed_cookie,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }
    return jsonify(status), 200
