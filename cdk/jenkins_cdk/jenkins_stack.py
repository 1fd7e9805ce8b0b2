import logging

from aws_cdk import (
    Annotations,
    CfnOutput,
    Stack,
    Token,
)
from constructs import Construct

from .jenkins_controller import JenkinsController
from .network import Network

logger = logging.getLogger(__name__)


class JenkinsStack(Stack):

    def __init__(self, scope: Construct, id: str, cidr=None, max_azs=None, **kwargs):
        super().__init__(scope, id, **kwargs)

        logger.debug("Building %s (cidr=%s, max_azs=%s)", id, cidr, max_azs)

        network = Network(self, cidr=cidr, max_azs=max_azs)
        controller = JenkinsController(self, network=network)

        # Read by JenkinsMacAgentStack
        self.vpc = network.vpc
        self.jenkins_sg = network.security_group
        self.load_balancer = controller.load_balancer
        self.asg = controller.asg

        CfnOutput(
            self,
            "loadbalancer-url-output",
            value=self.load_balancer.load_balancer_dns_name,
            description="Loadbalancer url",
            export_name="lb-url",
        )

        if Token.is_unresolved(self.region) or Token.is_unresolved(self.account):
            Annotations.of(self).add_warning_v2(
                "jenkins:envAgnostic",
                "Account/region unresolved; the VPC is limited to the AZs CDK assumes for environment-agnostic stacks",
            )
