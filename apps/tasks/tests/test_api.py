"""
Integration tests for tasks API endpoints.
"""
import json
from uuid import uuid4

from django.test import Client, TestCase

from apps.tasks.models import Task
from apps.users.models import User


class TasksAPITest(TestCase):

    def setUp(self):
        self.client = Client()
        self.user = User.objects.create(name='João Silva', email='joao@example.com')

    def _post(self, payload):
        return self.client.post('/tasks', data=json.dumps(payload), content_type='application/json')

    def _put(self, task_id, payload):
        return self.client.put(f'/tasks/{task_id}', data=json.dumps(payload), content_type='application/json')

    def _create(self, **overrides):
        payload = {'title': 'T', 'description': 'D', 'userId': str(self.user.id)}
        payload.update(overrides)
        response = self._post(payload)
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_create_task_defaults_to_pending(self):
        data = self._create()

        self.assertEqual(set(data), {'id', 'title', 'description', 'status', 'userId', 'createdAt'})
        self.assertEqual(data['title'], 'T')
        self.assertEqual(data['description'], 'D')
        self.assertEqual(data['status'], 'pending')
        self.assertEqual(data['userId'], str(self.user.id))

    def test_create_task_with_status(self):
        data = self._create(status='done')
        self.assertEqual(data['status'], 'done')

    def test_create_task_for_unknown_user(self):
        response = self._post({'title': 'T', 'description': 'D', 'userId': str(uuid4())})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Usuário não encontrado')
        self.assertEqual(Task.objects.count(), 0)

    def test_create_rejects_non_canonical_user_id(self):
        for user_id in (
            "{" + str(self.user.id) + "}",
            self.user.id.hex,
            f"urn:uuid:{self.user.id}",
        ):
            with self.subTest(user_id=user_id):
                response = self._post({'title': 'T', 'description': 'D', 'userId': user_id})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], ['O userId deve ser um UUID válido'])
        self.assertEqual(Task.objects.count(), 0)

    def test_create_rejects_null_status(self):
        response = self._post({'title': 'T', 'description': 'D', 'userId': str(self.user.id), 'status': None})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], ['Status deve ser pending ou done'])

    def test_create_validation_errors(self):
        response = self._post({'title': '', 'userId': 'abc', 'status': 'archived'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], [
            'O título é obrigatório',
            'A descrição é obrigatória',
            'O userId deve ser um UUID válido',
            'Status deve ser pending ou done',
        ])

    def test_list_tasks_includes_owner_name(self):
        self.assertEqual(self.client.get('/tasks').json(), [])
        created = self._create()

        response = self.client.get('/tasks')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]['id'], created['id'])
        self.assertEqual(data[0]['userName'], 'João Silva')

    def test_get_task(self):
        created = self._create()

        response = self.client.get(f"/tasks/{created['id']}")
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['userName'], 'João Silva')
        self.assertEqual(data['userId'], created['userId'])

    def test_get_unknown_task(self):
        response = self.client.get(f'/tasks/{uuid4()}')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {
            'statusCode': 404,
            'message': 'Tarefa não encontrada',
            'error': 'Not Found',
        })

    def test_update_task(self):
        created = self._create()

        response = self._put(created['id'], {'status': 'done', 'title': 'Novo título'})
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['status'], 'done')
        self.assertEqual(data['title'], 'Novo título')
        self.assertEqual(data['description'], 'D')
        self.assertEqual(data['userName'], 'João Silva')

    def test_update_cannot_change_owner(self):
        created = self._create()
        other = User.objects.create(name='Maria', email='maria@example.com')

        response = self._put(created['id'], {'userId': str(other.id)})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], ['property userId should not exist'])
        self.assertEqual(str(Task.objects.get(id=created['id']).user_id), created['userId'])

    def test_update_invalid_status(self):
        created = self._create()

        response = self._put(created['id'], {'status': 'archived'})
        self.assertEqual(response.status_code, 400)

    def test_update_unknown_task(self):
        response = self._put(uuid4(), {'title': 'X'})
        self.assertEqual(response.status_code, 404)

    def test_delete_task(self):
        created = self._create()

        response = self.client.delete(f"/tasks/{created['id']}")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get(f"/tasks/{created['id']}").status_code, 404)

    def test_delete_unknown_task(self):
        response = self.client.delete(f'/tasks/{uuid4()}')
        self.assertEqual(response.status_code, 404)

    def test_deleting_user_removes_tasks(self):
        created = self._create()

        response = self.client.delete(f'/users/{self.user.id}')
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get(f"/tasks/{created['id']}").status_code, 404)
