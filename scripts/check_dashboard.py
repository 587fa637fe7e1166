import sys
sys.path.insert(0, '.')
from app import app

with app.test_client() as client:
    r = client.get('/api/dashboard')
    view = r.get_json()
    print('api status', r.status_code)
    print('state:', view['state'])
    print('banner:', view['status_message'])
    if view['error']:
        print('error:', view['error'])
    print('zones:', [z['zone_name'] for z in view['data']])

    r = client.get('/')
    text = r.get_data(as_text=True)
    print('dashboard status', r.status_code)
    print('status banner present:', 'id="system-status"' in text)
