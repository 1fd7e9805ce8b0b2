from aws_cdk import (
    aws_ec2 as ec2,
    Stack,
)
from constructs import Construct

from .config import config


class Network(Construct):

    def __init__(self, scope: Stack, cidr=None, max_azs=None) -> None:
        super().__init__(scope, "Network")

        self.vpc = ec2.Vpc(
            self,
            "mac-vpc",
            ip_addresses=ec2.IpAddresses.cidr(cidr or config["DEFAULT"]["cidr"]),
            max_azs=int(max_azs or config["DEFAULT"]["max_azs"]),
        )

        self.security_group = ec2.SecurityGroup(
            self,
            "jenkins-sg",
            security_group_name="jenkins-sg",
            vpc=self.vpc,
        )

        # Controller and agents share this group; SSH stays inside it
        self.security_group.add_ingress_rule(
            self.security_group,
            ec2.Port.tcp(22),
            "Allow ssh access from the Jenkins systems",
        )
