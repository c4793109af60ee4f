from czone_server.models import PaPData, MovementPattern, SimData


def test_patterns_round_trip(client, make_zone):
    zone = make_zone()
    papdata = {'people': {'0': {'sex': 0, 'age': 31, 'home': '1'}}, 'homes': {'1': {'cbg': '401091001001'}}}
    patterns = {'0': {'homes': {'1': ['0']}, 'places': {'12': ['0']}}}

    r = client.post('/patterns', json={'czone_id': zone['id'], 'papdata': papdata, 'patterns': patterns})
    assert r.status_code == 200
    data = r.get_json()['data']
    assert isinstance(data['papdata']['id'], int)
    assert isinstance(data['patterns']['id'], int)

    r = client.get(f"/patterns/{zone['id']}")
    assert r.status_code == 200
    assert r.get_json()['data'] == {'papdata': papdata, 'patterns': patterns}


def test_patterns_store_serialized_text_and_timestamp(client, make_zone):
    zone = make_zone()
    client.post('/patterns', json={'czone_id': zone['id'], 'papdata': {'a': 1}, 'patterns': {'b': 2}})
    assert PaPData.query.filter_by(czone_id=zone['id']).one().papdata == '{"a": 1}'
    movement = MovementPattern.query.filter_by(czone_id=zone['id']).one()
    assert movement.patterns == '{"b": 2}'
    assert movement.start_date is not None


def test_patterns_missing_returns_404(client, make_zone):
    zone = make_zone()
    r = client.get(f"/patterns/{zone['id']}")
    assert r.status_code == 404
    assert 'message' in r.get_json()


def test_patterns_require_both_payloads(client, make_zone):
    zone = make_zone()
    r = client.post('/patterns', json={'czone_id': zone['id'], 'papdata': {}})
    assert r.status_code == 400
    r = client.post('/patterns', json={'czone_id': zone['id'], 'papdata': [], 'patterns': {}})
    assert r.status_code == 400
    assert PaPData.query.count() == 0


def test_second_patterns_upload_is_rejected(client, make_zone):
    zone = make_zone()
    body = {'czone_id': zone['id'], 'papdata': {'v': 1}, 'patterns': {'v': 1}}
    assert client.post('/patterns', json=body).status_code == 200

    r = client.post('/patterns', json=dict(body, papdata={'v': 2}, patterns={'v': 2}))
    assert r.status_code == 500
    assert r.get_json()['message'] == 'Database error'

    assert PaPData.query.count() == 1
    assert MovementPattern.query.count() == 1
    stored = client.get(f"/patterns/{zone['id']}").get_json()['data']
    assert stored == {'papdata': {'v': 1}, 'patterns': {'v': 1}}


def test_patterns_for_unknown_zone_write_nothing(client):
    r = client.post('/patterns', json={'czone_id': 42, 'papdata': {}, 'patterns': {}})
    assert r.status_code == 500
    assert PaPData.query.count() == 0
    assert MovementPattern.query.count() == 0


def test_simdata_upsert_replaces_value(client, make_zone):
    zone = make_zone()
    r = client.post('/simdata', json={'czone_id': zone['id'], 'simdata': 'first run'})
    assert r.status_code == 200
    assert r.get_json() == {'message': 'Success'}

    r = client.post('/simdata', json={'czone_id': zone['id'], 'simdata': 'second run'})
    assert r.status_code == 200

    assert SimData.query.filter_by(czone_id=zone['id']).count() == 1
    r = client.get(f"/simdata/{zone['id']}")
    assert r.status_code == 200
    assert r.get_json() == {'data': 'second run'}


def test_simdata_missing_returns_404(client, make_zone):
    zone = make_zone()
    r = client.get(f"/simdata/{zone['id']}")
    assert r.status_code == 404


def test_simdata_must_be_a_string(client, make_zone):
    zone = make_zone()
    r = client.post('/simdata', json={'czone_id': zone['id'], 'simdata': {'not': 'text'}})
    assert r.status_code == 400
