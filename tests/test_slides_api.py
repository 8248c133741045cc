"""
Tests for slide and admin slide endpoints
"""
import uuid

from society_cms.schemas.slideshow_settings import SlideshowSettingsUpdate
from society_cms.services.settings_service import SettingsService


class TestAccess:
    async def test_create_requires_login(self, client, make_slideshow):
        slideshow = await make_slideshow()

        response = await client.post(
            '/api/v1/slides', json={'slideshow_id': str(slideshow.id), 'title': {'en': 'A'}}
        )

        assert response.status_code == 401
        assert response.json() == {'success': False, 'error': 'Unauthorized - Admin access required'}

    async def test_create_requires_admin(self, user_client, make_slideshow):
        slideshow = await make_slideshow()

        response = await user_client.post(
            '/api/v1/slides', json={'slideshow_id': str(slideshow.id), 'title': {'en': 'A'}}
        )

        assert response.status_code == 401
        assert response.json()['error'] == 'Unauthorized - Admin access required'

    async def test_bad_token(self, client):
        client.cookies.set('access_token', 'not-a-token')

        response = await client.delete(f'/api/v1/slides/{uuid.uuid4()}')

        assert response.status_code == 401
        assert response.json()['success'] is False

    async def test_listing_is_public(self, client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        await make_slides(slideshow, 3)

        response = await client.get('/api/v1/slides', params={'slideshow_id': str(slideshow.id)})

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert [slide['order'] for slide in body['data']] == [1, 2, 3]
        assert body['pagination'] == {'page': 1, 'limit': 20, 'total': 3, 'pages': 1}


class TestSlideCrud:
    async def test_create_appends(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        await make_slides(slideshow, 2)

        response = await admin_client.post(
            '/api/v1/slides',
            json={
                'slideshow_id': str(slideshow.id),
                'title': {'en': 'Pongal', 'ta': 'பொங்கல்'},
                'animation': 'zoom',
                'duration': 4000,
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body['message'] == 'Slide created successfully'
        assert body['data']['order'] == 3
        assert body['data']['title'] == {'en': 'Pongal', 'ta': 'பொங்கல்'}
        assert body['data']['content'] == {'en': None, 'ta': None}
        assert body['data']['animation'] == 'zoom'

    async def test_create_with_short_duration(self, admin_client, make_slideshow):
        slideshow = await make_slideshow()

        response = await admin_client.post(
            '/api/v1/slides',
            json={'slideshow_id': str(slideshow.id), 'title': {'en': 'A'}, 'duration': 500},
        )

        assert response.status_code == 400
        assert response.json()['success'] is False
        assert 'duration' in response.json()['error']

    async def test_create_with_blank_title(self, admin_client, make_slideshow):
        slideshow = await make_slideshow()

        response = await admin_client.post(
            '/api/v1/slides', json={'slideshow_id': str(slideshow.id), 'title': {'en': ' '}}
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'Title is required in at least one language'

    async def test_create_in_unknown_slideshow(self, admin_client):
        response = await admin_client.post(
            '/api/v1/slides', json={'slideshow_id': str(uuid.uuid4()), 'title': {'en': 'A'}}
        )

        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Slideshow not found'}

    async def test_create_in_full_slideshow(self, admin_client, db_session, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        await make_slides(slideshow, 1)
        await SettingsService(db_session).update(SlideshowSettingsUpdate(general={'max_slides_per_show': 1}))

        response = await admin_client.post(
            '/api/v1/slides', json={'slideshow_id': str(slideshow.id), 'title': {'en': 'A'}}
        )

        assert response.status_code == 409

    async def test_get(self, client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 1)

        response = await client.get(f'/api/v1/slides/{slides[0].id}')

        assert response.status_code == 200
        assert response.json()['data']['title']['en'] == 'S1'

    async def test_get_missing(self, client):
        response = await client.get(f'/api/v1/slides/{uuid.uuid4()}')

        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Slide not found'}

    async def test_update_moves_to_other_slideshow(
        self, admin_client, make_slideshow, make_slides, scope_titles
    ):
        source = await make_slideshow()
        target = await make_slideshow()
        slides = await make_slides(source, 3)

        response = await admin_client.put(
            f'/api/v1/slides/{slides[1].id}',
            json={'slideshow_id': str(target.id), 'title': {'en': 'Moved'}},
        )

        assert response.status_code == 200
        assert response.json()['data']['order'] == 1
        assert response.json()['data']['slideshow_id'] == str(target.id)
        assert await scope_titles(source.id) == ['S1', 'S3']
        assert await scope_titles(target.id) == ['Moved']

    async def test_update_with_null_duration(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 1)

        response = await admin_client.put(f'/api/v1/slides/{slides[0].id}', json={'duration': None})

        assert response.status_code == 200
        assert response.json()['data']['duration'] == 5000

    async def test_update_with_null_required_fields(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 1)

        response = await admin_client.put(
            f'/api/v1/slides/{slides[0].id}',
            json={'is_active': None, 'animation': None, 'text_color': None, 'content': None},
        )

        assert response.status_code == 200
        data = response.json()['data']
        assert data['is_active'] is True
        assert data['animation'] == 'fade'
        assert data['text_color'] == '#000000'
        assert data['content'] == {'en': None, 'ta': None}

    async def test_delete(self, admin_client, make_slideshow, make_slides, scope_orders):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 3)

        response = await admin_client.delete(f'/api/v1/slides/{slides[0].id}')

        assert response.status_code == 200
        assert response.json()['message'] == 'Slide deleted successfully'
        assert response.json()['data'] is None
        assert await scope_orders(slideshow.id) == [1, 2]


class TestSlideActions:
    async def test_move_up_at_top(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 2)

        response = await admin_client.patch(f'/api/v1/slides/{slides[0].id}', json={'action': 'move-up'})

        assert response.status_code == 400
        assert response.json() == {'success': False, 'error': 'Slide is already at the top'}

    async def test_move_down(self, admin_client, make_slideshow, make_slides, scope_titles):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 2)

        response = await admin_client.patch(f'/api/v1/slides/{slides[0].id}', json={'action': 'move-down'})

        assert response.status_code == 200
        assert response.json()['message'] == 'Slide moved down successfully'
        assert await scope_titles(slideshow.id) == ['S2', 'S1']

    async def test_set_order(self, admin_client, make_slideshow, make_slides, scope_titles):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 3)

        response = await admin_client.patch(
            f'/api/v1/slides/{slides[0].id}', json={'action': 'set-order', 'value': 3}
        )

        assert response.status_code == 200
        assert response.json()['data']['order'] == 3
        assert await scope_titles(slideshow.id) == ['S2', 'S3', 'S1']

    async def test_set_order_invalid(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 2)

        response = await admin_client.patch(
            f'/api/v1/slides/{slides[0].id}', json={'action': 'set-order', 'value': 0}
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid order value'

    async def test_duplicate(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 2)

        response = await admin_client.patch(f'/api/v1/slides/{slides[0].id}', json={'action': 'duplicate'})

        assert response.status_code == 200
        data = response.json()['data']
        assert data['id'] != str(slides[0].id)
        assert data['order'] == 3
        assert data['is_active'] is False
        assert data['title']['en'] == 'S1 (Copy)'

    async def test_unknown_action(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 1)

        response = await admin_client.patch(f'/api/v1/slides/{slides[0].id}', json={'action': 'spin'})

        assert response.status_code == 400
        assert response.json()['success'] is False


class TestAdminSlides:
    async def test_list_with_stats(self, admin_client, make_slideshow, make_slides):
        slideshow = await make_slideshow(name='Home hero')
        slides = await make_slides(slideshow, 3)
        slides[2].is_active = False

        response = await admin_client.get(
            '/api/v1/admin/slides',
            params={'include_stats': 'true', 'sort_by': 'order', 'sort_order': 'asc'},
        )

        assert response.status_code == 200
        data = response.json()['data']
        assert [slide['title']['en'] for slide in data['slides']] == ['S1', 'S2', 'S3']
        assert data['stats']['total'] == 3
        assert data['stats']['inactive'] == 1
        assert data['stats']['slideshow_breakdown'][0]['name'] == 'Home hero'

    async def test_list_requires_admin(self, user_client):
        response = await user_client.get('/api/v1/admin/slides')

        assert response.status_code == 401

    async def test_bulk_move(self, admin_client, make_slideshow, make_slides, scope_titles):
        source = await make_slideshow()
        target = await make_slideshow(name='Events')
        slides = await make_slides(source, 3)

        response = await admin_client.post(
            '/api/v1/admin/slides',
            json={
                'action': 'move-to-slideshow',
                'slide_ids': [str(slides[0].id), str(slides[1].id)],
                'slideshow_id': str(target.id),
            },
        )

        assert response.status_code == 200
        assert response.json()['data'] == {'affected': 2}
        assert response.json()['message'] == '2 slides moved to Events'
        assert await scope_titles(source.id) == ['S3']
        assert await scope_titles(target.id) == ['S1', 'S2']

    async def test_bulk_needs_ids(self, admin_client):
        response = await admin_client.post('/api/v1/admin/slides', json={'action': 'activate', 'slide_ids': []})

        assert response.status_code == 400

    async def test_bulk_delete(self, admin_client, make_slideshow, make_slides, scope_orders):
        slideshow = await make_slideshow()
        slides = await make_slides(slideshow, 4)

        response = await admin_client.request(
            'DELETE',
            '/api/v1/admin/slides',
            json={'slide_ids': [str(slides[1].id), str(slides[2].id)]},
        )

        assert response.status_code == 200
        assert response.json()['data'] == {'affected': 2}
        assert await scope_orders(slideshow.id) == [1, 2]
