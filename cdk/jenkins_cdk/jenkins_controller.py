from aws_cdk import (
    aws_autoscaling as autoscaling,
    aws_ec2 as ec2,
    aws_elasticloadbalancingv2 as elbv2,
    aws_iam as iam,
    Stack,
)
from constructs import Construct

from .config import config
from .network import Network
from .user_data import render_controller_script


class JenkinsController(Construct):
    """
    Single Jenkins controller behind a public ALB.

    The fleet is pinned to one instance so the auto scaling group only acts
    as a replacement mechanism. Traffic reaches the instance through the
    listener, and operators through SSM Session Manager rather than SSH.
    """

    def __init__(self, scope: Stack, network: Network) -> None:
        super().__init__(scope, "Controller")

        self.load_balancer = elbv2.ApplicationLoadBalancer(
            self,
            "alb-jenkins",
            vpc=network.vpc,
            internet_facing=True,
        )

        self.listener = self.load_balancer.add_listener(
            "alb-http-listener",
            port=int(config["DEFAULT"]["listener_port"]),
            open=True,
        )

        user_data = ec2.UserData.for_linux()
        user_data.add_commands(render_controller_script())

        self.asg = autoscaling.AutoScalingGroup(
            self,
            "jenkins-asg",
            vpc=network.vpc,
            instance_type=ec2.InstanceType(config["DEFAULT"]["controller_instance_type"]),
            machine_image=ec2.MachineImage.latest_amazon_linux2(),
            min_capacity=1,
            max_capacity=1,
            desired_capacity=1,
            user_data=user_data,
            security_group=network.security_group,
            block_devices=[
                autoscaling.BlockDevice(
                    device_name="/dev/xvda",
                    volume=autoscaling.BlockDeviceVolume.ebs(
                        int(config["DEFAULT"]["controller_volume_size"]),
                        volume_type=autoscaling.EbsDeviceVolumeType.GP2,
                    ),
                )
            ],
        )

        self.asg.role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name(
                "AmazonSSMManagedInstanceCore"
            )
        )

        # /login only answers once Jenkins has finished starting
        self.target_group = self.listener.add_targets(
            "jenkins-fleet",
            port=int(config["DEFAULT"]["controller_port"]),
            targets=[self.asg],
            health_check=elbv2.HealthCheck(
                path=config["DEFAULT"]["health_check_path"],
            ),
        )
