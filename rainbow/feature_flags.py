from rainbow.common.environments import flag

in_global_debug_mode = flag('RAINBOW_DEBUG',
                            description='Enable the debug mode')
