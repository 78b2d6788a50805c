# apps/board/views.py

from django.http import JsonResponse
from django.views import View


class EngineView(View):
    """
    Base das views que leem o engine do board (somente leitura)

    Views assíncronas: rodam no mesmo event loop dos consumers
    e leem o estado através do lock do engine.
    """

    http_method_names = ['get', 'head', 'options']
    engine = None


class BoardStateView(EngineView):
    """
    Snapshot atual do board: tarefas e usuários online
    """

    async def get(self, request):
        return JsonResponse(await self.engine.snapshot())


class HealthView(EngineView):
    """
    Health check simples para load balancer / monitoramento
    """

    async def get(self, request):
        stats = await self.engine.stats()
        return JsonResponse({'status': 'ok', **stats})
