from aws_cdk import (
    aws_ec2 as ec2,
    aws_iam as iam,
    Stack,
)
from constructs import Construct

from .config import config
from .user_data import render_mac_agent_script


def mac_ami_parameter(instance_type: str, release: str) -> str:
    """Public SSM parameter holding the latest macOS AMI for the instance's architecture."""
    # mac1 is Intel, every later family is Apple silicon
    arch = "x86_64_mac" if instance_type.split(".")[0] == "mac1" else "arm64_mac"
    return f"/aws/service/ec2-macos/{release}/{arch}/latest/image_id"


class JenkinsMacAgent(Construct):
    """
    macOS build agent on an EC2 Mac dedicated host.

    Joins the controller's VPC and security group, so the controller can
    launch it over SSH through the group's self-referencing rule.
    """

    def __init__(
        self,
        stack: Stack,
        vpc: ec2.IVpc,
        security_group: ec2.ISecurityGroup,
    ) -> None:
        super().__init__(stack, "MacAgent")

        instance_type = config["DEFAULT"]["mac_instance_type"]

        # Host and instance must land in the same AZ
        subnet = vpc.private_subnets[0]

        # Mac instances only run on dedicated hosts
        self.host = ec2.CfnHost(
            self,
            "Host",
            availability_zone=subnet.availability_zone,
            instance_type=instance_type,
            auto_placement="on",
        )

        self.role = iam.Role(
            self,
            "InstanceRole",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
        )
        self.role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name(
                "AmazonSSMManagedInstanceCore"
            )
        )

        self.instance = ec2.Instance(
            self,
            "Instance",
            vpc=vpc,
            vpc_subnets=ec2.SubnetSelection(subnets=[subnet]),
            instance_type=ec2.InstanceType(instance_type),
            machine_image=ec2.MachineImage.from_ssm_parameter(
                mac_ami_parameter(instance_type, config["DEFAULT"]["mac_os_release"])
            ),
            security_group=security_group,
            role=self.role,
            user_data=ec2.UserData.custom(render_mac_agent_script()),
            block_devices=[
                ec2.BlockDevice(
                    device_name="/dev/sda1",
                    volume=ec2.BlockDeviceVolume.ebs(
                        int(config["DEFAULT"]["mac_volume_size"]),
                        volume_type=ec2.EbsDeviceVolumeType.GP3,
                    ),
                )
            ],
        )

        # ec2.Instance has no host placement props
        cfn_instance = self.instance.node.default_child
        cfn_instance.add_property_override("Tenancy", "host")
        cfn_instance.add_property_override("HostId", self.host.ref)
