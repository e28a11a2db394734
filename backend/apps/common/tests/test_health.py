import json
import unittest
from unittest import mock

from django.test import override_settings

from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @override_settings(ORDERS_API_URL='http://orders.local/api')
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_database_passes(self, mock_db_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['orders_api']['status'], 'configured')
        self.assertEqual(payload['checks']['orders_api']['url'], 'http://orders.local/api')

    @override_settings(ORDERS_API_URL='')
    @mock.patch('apps.common.views._db_check', return_value={'status': 'fail', 'error': 'db down'})
    def test_ready_health_degraded_on_database_failure(self, mock_db_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['orders_api']['status'], 'skipped')


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_and_formats_message(self):
        from decimal import Decimal
        from apps.common import get_logger

        log = get_logger('apps.tests').bind(component='carts').bind(layer='store')
        self.assertEqual(log.context, {'component': 'carts', 'layer': 'store'})
        rendered = log.format('Cart hydrated', {'lines': 2, 'total': Decimal('10.50')})
        self.assertEqual(rendered, 'Cart hydrated | lines=2 total=10.50')

    def test_log_calls_reach_stdlib_logger(self):
        from apps.common import get_logger

        log = get_logger('apps.tests.capture').bind(component='ui')
        with self.assertLogs('apps.tests.capture', level='INFO') as captured:
            log.info('Side menu toggled', open=True)
        self.assertIn('Side menu toggled | component=ui open=True', captured.output[0])
