from cf_client.client import Client
from cf_client.entities.App import App
from cf_client.entities.Process import Process
from cf_client.entities.Task import HeaderOption, Task, TaskConfig

__all__ = ["App", "Client", "HeaderOption", "Process", "Task", "TaskConfig"]
