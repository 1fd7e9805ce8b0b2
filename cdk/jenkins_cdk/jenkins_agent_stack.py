import logging

from aws_cdk import (
    CfnOutput,
    Stack,
)
from constructs import Construct

from .jenkins_agent import JenkinsMacAgent
from .jenkins_stack import JenkinsStack

logger = logging.getLogger(__name__)


class JenkinsMacAgentStack(Stack):

    def __init__(self, scope: Construct, id: str, controller: JenkinsStack, **kwargs):
        # Checked before super() so a bad call leaves nothing half-built in the app
        if not isinstance(controller, JenkinsStack):
            raise ValueError(
                f"{id} needs a constructed JenkinsStack to join, got {controller!r}"
            )

        super().__init__(scope, id, **kwargs)

        logger.debug("Building %s against %s", id, controller.stack_name)

        self.add_dependency(controller)

        agent = JenkinsMacAgent(
            self,
            vpc=controller.vpc,
            security_group=controller.jenkins_sg,
        )
        self.instance = agent.instance
        self.host = agent.host

        CfnOutput(
            self,
            "mac-agent-private-ip-output",
            value=agent.instance.instance_private_ip,
            description="Mac agent private ip",
            export_name="mac-agent-private-ip",
        )

        CfnOutput(
            self,
            "mac-agent-host-output",
            value=agent.host.ref,
            description="Mac agent dedicated host id",
        )
